"""Donation eligibility - enforce the minimum gap between whole-blood donations"""

from datetime import date
from typing import Optional
from bloodbank_gateway.domain.models import EligibilityResult
from bloodbank_gateway.domain.exceptions import InvalidDateRange
from bloodbank_gateway.utils.date_utils import add_days, as_date, days_between

MIN_DONATION_GAP_DAYS = 56  # 8 weeks for whole blood


def check_eligibility(last_donation_date: Optional[date], now: date) -> EligibilityResult:
    """
    Check whether a donor may donate again.

    The caller passes `now`; this function never reads a clock.
    A donor becomes eligible on the 56th day after the last donation.

    Raises:
        InvalidDateRange: If last_donation_date is after now
    """
    if last_donation_date is None:
        return EligibilityResult(
            eligible=True,
            next_eligible_date=None,
            days_remaining=0,
            message="Eligible to donate (no previous donation recorded)",
        )

    days_since = days_between(last_donation_date, now)
    if days_since < 0:
        raise InvalidDateRange(
            f"Last donation date {as_date(last_donation_date).isoformat()} "
            f"is after {as_date(now).isoformat()}"
        )

    if days_since >= MIN_DONATION_GAP_DAYS:
        return EligibilityResult(
            eligible=True,
            next_eligible_date=None,
            days_remaining=0,
            message=f"Eligible to donate ({days_since} days since last donation)",
        )

    days_remaining = MIN_DONATION_GAP_DAYS - days_since
    next_date = as_date(add_days(last_donation_date, MIN_DONATION_GAP_DAYS))

    return EligibilityResult(
        eligible=False,
        next_eligible_date=next_date,
        days_remaining=days_remaining,
        message=(
            f"Not eligible yet. {days_remaining} days remaining "
            f"(next eligible: {next_date.isoformat()})"
        ),
    )
