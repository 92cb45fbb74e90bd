"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import FrozenSet, List, Optional


class BloodType(str, Enum):
    """ABO/Rh blood group"""

    O_NEG = "O-"
    O_POS = "O+"
    A_NEG = "A-"
    A_POS = "A+"
    B_NEG = "B-"
    B_POS = "B+"
    AB_NEG = "AB-"
    AB_POS = "AB+"


class BadgeId(str, Enum):
    """Milestone badges a donor can hold"""

    VERIFIED = "verified"
    FIRST_BLOOD = "first_blood"
    REGULAR_DONOR = "regular_donor"
    HERO = "hero"
    LIFESAVER = "lifesaver"
    LEGEND = "legend"


@dataclass(frozen=True)
class Badge:
    """Display metadata for a badge"""

    id: BadgeId
    label: str
    description: str
    icon: str
    min_donations: int


@dataclass(frozen=True)
class DonorCandidate:
    """Registered donor considered for a blood request"""

    blood_type: str
    district: Optional[str]
    upazila: Optional[str]
    is_verified: bool
    total_donations: int
    is_available: bool
    donor_id: Optional[str] = None


@dataclass(frozen=True)
class DonorMatch:
    """Ranked donors for one recipient blood type"""

    blood_type: BloodType
    compatible_types: List[BloodType]
    donors: List[DonorCandidate]

    @property
    def total_matched(self) -> int:
        return len(self.donors)


@dataclass(frozen=True)
class EligibilityResult:
    """Whether a donor may give whole blood again"""

    eligible: bool
    next_eligible_date: Optional[date]
    days_remaining: int
    message: str


@dataclass(frozen=True)
class ScoringInput:
    """Donor counters and flags that drive points and badges"""

    total_donations: int
    is_verified: bool = False
    is_available: bool = False
    has_complete_profile: bool = False


@dataclass(frozen=True)
class ScoringResult:
    """Accumulated points and earned badges"""

    points: int
    badges: FrozenSet[BadgeId] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DonorProfile:
    """Snapshot of the stored donor fields needed to record a donation"""

    total_donations: int
    is_verified: bool
    is_available: bool
    district: Optional[str] = None
    upazila: Optional[str] = None
    blood_type: Optional[str] = None
    badges: FrozenSet[BadgeId] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DonationOutcome:
    """Updated donor values after a donation is recorded"""

    total_donations: int
    points: int
    badges: FrozenSet[BadgeId]
    new_badges: FrozenSet[BadgeId]
    points_awarded: int
    last_donation_date: date
