"""Donor matching - filter candidates by compatibility and rank by proximity and track record"""

from typing import FrozenSet, Iterable, List, Optional, Tuple, Union
from bloodbank_gateway.domain.models import BloodType, DonorCandidate, DonorMatch
from bloodbank_gateway.domain.compatibility import (
    compatible_donor_types,
    parse_blood_type,
    sort_blood_types,
)
from bloodbank_gateway.domain.exceptions import InvalidBloodType


def _same_place(value: Optional[str], preferred: Optional[str]) -> bool:
    """Case-insensitive location comparison; a missing side never matches"""
    if not value or not preferred:
        return False
    return value.strip().casefold() == preferred.strip().casefold()


def _is_compatible(candidate: DonorCandidate, compatible: FrozenSet[BloodType]) -> bool:
    try:
        donor_type = parse_blood_type(candidate.blood_type)
    except InvalidBloodType:
        # Donor records with a malformed blood type can never be matched
        return False
    return donor_type in compatible


def _rank_key(
    candidate: DonorCandidate,
    preferred_district: Optional[str],
    preferred_upazila: Optional[str],
) -> Tuple[bool, bool, bool, int]:
    # False sorts before True, so each flag is negated
    return (
        not _same_place(candidate.district, preferred_district),
        not _same_place(candidate.upazila, preferred_upazila),
        not candidate.is_verified,
        -(candidate.total_donations or 0),
    )


def rank_candidates(
    recipient_type: Union[str, BloodType],
    preferred_district: Optional[str],
    preferred_upazila: Optional[str],
    candidates: Iterable[DonorCandidate],
) -> List[DonorCandidate]:
    """
    Filter donors to available, compatible ones and rank them.

    Ranking (each criterion only breaks ties of the previous one):
    1. Same district as the request
    2. Same upazila as the request
    3. Verified donors
    4. Higher lifetime donation count

    Candidates equal on all four keep their input order.

    Raises:
        InvalidBloodType: If recipient_type is not a known blood group
    """
    compatible = compatible_donor_types(recipient_type)

    eligible = [
        c for c in candidates
        if c.is_available and _is_compatible(c, compatible)
    ]

    # list.sort is stable
    eligible.sort(key=lambda c: _rank_key(c, preferred_district, preferred_upazila))
    return eligible


def match_donors(
    recipient_type: Union[str, BloodType],
    candidates: Iterable[DonorCandidate],
    preferred_district: Optional[str] = None,
    preferred_upazila: Optional[str] = None,
    limit: Optional[int] = None,
) -> DonorMatch:
    """
    Rank candidates for a blood request and report the compatible groups.

    Args:
        recipient_type: Blood type of the patient
        candidates: Donor records loaded by the caller
        preferred_district: District of the request (location hint)
        preferred_upazila: Upazila of the request (location hint)
        limit: Keep at most this many donors after ranking (None = all)
    """
    recipient = parse_blood_type(recipient_type)
    ranked = rank_candidates(recipient, preferred_district, preferred_upazila, candidates)

    if limit is not None:
        ranked = ranked[: max(limit, 0)]

    return DonorMatch(
        blood_type=recipient,
        compatible_types=sort_blood_types(compatible_donor_types(recipient)),
        donors=ranked,
    )
