"""Unit tests for donation eligibility"""

import pytest
from datetime import date, datetime, timedelta, timezone
from bloodbank_gateway.domain.eligibility import MIN_DONATION_GAP_DAYS, check_eligibility
from bloodbank_gateway.domain.exceptions import InvalidDateRange


def test_no_previous_donation_is_eligible(today: date):
    result = check_eligibility(None, today)

    assert result.eligible is True
    assert result.next_eligible_date is None
    assert result.days_remaining == 0
    assert result.message == "Eligible to donate (no previous donation recorded)"


def test_exactly_56_days_is_eligible(today: date):
    """Inclusive lower bound"""
    result = check_eligibility(today - timedelta(days=56), today)

    assert result.eligible is True
    assert result.days_remaining == 0
    assert result.next_eligible_date is None
    assert result.message == "Eligible to donate (56 days since last donation)"


def test_55_days_is_one_day_short(today: date):
    last = today - timedelta(days=55)
    result = check_eligibility(last, today)

    assert result.eligible is False
    assert result.days_remaining == 1
    assert result.next_eligible_date == last + timedelta(days=MIN_DONATION_GAP_DAYS)
    assert result.next_eligible_date == today + timedelta(days=1)


def test_not_eligible_message_includes_date():
    result = check_eligibility(date(2024, 5, 1), date(2024, 5, 11))

    assert result.days_remaining == 46
    assert result.next_eligible_date == date(2024, 6, 26)
    assert result.message == "Not eligible yet. 46 days remaining (next eligible: 2024-06-26)"


def test_same_day_donation_needs_full_gap(today: date):
    result = check_eligibility(today, today)
    assert result.eligible is False
    assert result.days_remaining == MIN_DONATION_GAP_DAYS


def test_future_last_donation_raises(today: date):
    with pytest.raises(InvalidDateRange):
        check_eligibility(today + timedelta(days=1), today)


def test_datetime_inputs_floor_partial_days():
    """55 days and 23 hours is still 55 whole days"""
    last = datetime(2024, 1, 1, 12, 0)
    now = last + timedelta(days=55, hours=23)

    result = check_eligibility(last, now)

    assert result.eligible is False
    assert result.days_remaining == 1
    assert result.next_eligible_date == date(2024, 2, 26)


def test_mixed_date_and_datetime(today: date):
    last = datetime.combine(today - timedelta(days=60), datetime.min.time())
    result = check_eligibility(last, today)
    assert result.eligible is True
    assert result.message == "Eligible to donate (60 days since last donation)"


def test_aware_and_naive_datetimes_compare_calendar_dates():
    """Stored UTC timestamp against a naive local 'now'"""
    last = datetime(2024, 1, 1, 23, 0, tzinfo=timezone.utc)
    now = datetime(2024, 2, 26, 1, 0)

    result = check_eligibility(last, now)

    assert result.eligible is True
    assert result.message == "Eligible to donate (56 days since last donation)"


def test_aware_future_date_against_naive_now_raises():
    last = datetime(2024, 3, 2, 8, 0, tzinfo=timezone(timedelta(hours=6)))
    with pytest.raises(InvalidDateRange):
        check_eligibility(last, datetime(2024, 3, 1, 8, 0))


def test_result_is_deterministic(today: date):
    last = today - timedelta(days=10)
    assert check_eligibility(last, today) == check_eligibility(last, today)
