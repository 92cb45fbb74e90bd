"""Prometheus metrics for monitoring match volume, match quality, and donor rewards"""

from typing import Iterable
from prometheus_client import Counter, Histogram

# Match metrics
match_counter = Counter(
    "bloodbank_match_total",
    "Total donor match requests",
    ["outcome"],  # matched | no_match
)

matched_donors_histogram = Histogram(
    "bloodbank_matched_donors",
    "Donors returned per match request",
    buckets=[0, 1, 2, 5, 10, 20, 50],
)

# Gamification metrics
donation_scored_counter = Counter(
    "bloodbank_donations_scored_total",
    "Donations recorded and scored",
)

badge_awarded_counter = Counter(
    "bloodbank_badges_awarded_total",
    "Badges newly awarded by a recorded donation",
    ["badge"],
)

# Domain validation failures
domain_error_counter = Counter(
    "bloodbank_domain_errors_total",
    "Requests rejected by domain validation",
    ["error"],  # InvalidBloodType | InvalidDateRange | InvalidInput
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_match(matched_count: int) -> None:
    """Record match outcome and result size"""
    outcome = "matched" if matched_count else "no_match"
    match_counter.labels(outcome=outcome).inc()
    matched_donors_histogram.observe(matched_count)


def record_donation(new_badges: Iterable[str]) -> None:
    """Record a scored donation and any badges it unlocked"""
    donation_scored_counter.inc()
    for badge in new_badges:
        badge_awarded_counter.labels(badge=badge).inc()
