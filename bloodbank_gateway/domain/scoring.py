"""Gamification engine - donor points and milestone badges"""

from datetime import date
from typing import FrozenSet, Iterable, List, Optional
from bloodbank_gateway.domain.models import (
    Badge,
    BadgeId,
    DonationOutcome,
    DonorProfile,
    ScoringInput,
    ScoringResult,
)
from bloodbank_gateway.domain.exceptions import InvalidInput

# Point values
POINTS_PER_DONATION = 100
POINTS_FIRST_DONATION = 150
POINTS_VERIFIED = 75
POINTS_AVAILABILITY_ON = 25
POINTS_PROFILE_COMPLETE = 50

# Canonical badge order; VERIFIED is flag-gated, the rest are count-gated
BADGES: List[Badge] = [
    Badge(BadgeId.FIRST_BLOOD, "First Blood", "Completed first donation", "🩸", 1),
    Badge(BadgeId.REGULAR_DONOR, "Regular Donor", "3+ donations", "⭐", 3),
    Badge(BadgeId.HERO, "Hero", "10+ donations", "🦸", 10),
    Badge(BadgeId.LIFESAVER, "Lifesaver", "25+ donations", "💎", 25),
    Badge(BadgeId.LEGEND, "Legend", "50+ donations", "👑", 50),
    Badge(BadgeId.VERIFIED, "Verified Donor", "Identity verified by admin", "✅", 0),
]


def _validate_donations(total_donations: int) -> None:
    if isinstance(total_donations, bool) or not isinstance(total_donations, int):
        raise InvalidInput(f"total_donations must be an integer, got {total_donations!r}")
    if total_donations < 0:
        raise InvalidInput(f"total_donations cannot be negative: {total_donations}")


def calculate_points(scoring_input: ScoringInput) -> int:
    """
    Sum the donor's points. All components are additive with no caps.

    - 100 per donation
    - 150 one-time bonus once the first donation is made
    - 75 for an admin-verified identity
    - 25 for being marked available
    - 50 for a complete profile
    """
    _validate_donations(scoring_input.total_donations)

    points = scoring_input.total_donations * POINTS_PER_DONATION
    if scoring_input.total_donations >= 1:
        points += POINTS_FIRST_DONATION
    if scoring_input.is_verified:
        points += POINTS_VERIFIED
    if scoring_input.is_available:
        points += POINTS_AVAILABILITY_ON
    if scoring_input.has_complete_profile:
        points += POINTS_PROFILE_COMPLETE

    return points


def calculate_badges(total_donations: int, is_verified: bool) -> FrozenSet[BadgeId]:
    """
    Badges earned for a donation count and verification status.

    Each badge is evaluated independently, so a higher milestone never
    removes a lower one.
    """
    _validate_donations(total_donations)

    earned = set()
    for badge in BADGES:
        if badge.id == BadgeId.VERIFIED:
            if is_verified:
                earned.add(badge.id)
        elif total_donations >= badge.min_donations:
            earned.add(badge.id)

    return frozenset(earned)


def score(scoring_input: ScoringInput) -> ScoringResult:
    """
    Main entry point: compute points and badges for a donor.

    Raises:
        InvalidInput: If total_donations is negative
    """
    return ScoringResult(
        points=calculate_points(scoring_input),
        badges=calculate_badges(scoring_input.total_donations, scoring_input.is_verified),
    )


def has_complete_profile(
    district: Optional[str],
    upazila: Optional[str],
    blood_type: Optional[str],
) -> bool:
    """A profile is complete once location and blood type are filled in"""
    return all(value and value.strip() for value in (district, upazila, blood_type))


def record_donation(profile: DonorProfile, donation_date: date) -> DonationOutcome:
    """
    Compute the donor's new counters after one more donation.

    Badges are recomputed from the new counters, so a revoked verification
    drops the verified badge. `new_badges` lists only badges that neither
    the prior counters nor the stored profile already held. Nothing is
    persisted here.
    """
    _validate_donations(profile.total_donations)
    total = profile.total_donations + 1

    result = score(
        ScoringInput(
            total_donations=total,
            is_verified=profile.is_verified,
            is_available=profile.is_available,
            has_complete_profile=has_complete_profile(
                profile.district, profile.upazila, profile.blood_type
            ),
        )
    )

    held_before = calculate_badges(profile.total_donations, profile.is_verified) | profile.badges
    badges = result.badges

    return DonationOutcome(
        total_donations=total,
        points=result.points,
        badges=badges,
        new_badges=badges - held_before,
        points_awarded=POINTS_PER_DONATION,
        last_donation_date=donation_date,
    )


def get_badge_details(badge_ids: Iterable[BadgeId]) -> List[Badge]:
    """Display metadata for the given badges, in canonical order"""
    try:
        wanted = {BadgeId(b) for b in badge_ids}
    except ValueError as e:
        raise InvalidInput(f"Unknown badge: {e}") from e
    return [badge for badge in BADGES if badge.id in wanted]
