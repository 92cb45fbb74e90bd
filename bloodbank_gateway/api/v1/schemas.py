"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Optional


class DonorCandidateSchema(BaseModel):
    """Donor record supplied by the caller for matching"""

    donor_id: Optional[str] = Field(None, description="Caller's donor identifier")
    blood_type: str = Field(..., min_length=1, description="Donor blood type, e.g. 'O-'")
    district: Optional[str] = None
    upazila: Optional[str] = None
    is_verified: bool = False
    total_donations: int = Field(0, ge=0)
    is_available: bool = True


class MatchRequest(BaseModel):
    """Request body for POST /v1/match"""

    blood_type: str = Field(..., min_length=1, description="Recipient blood type")
    district: Optional[str] = Field(None, description="District of the blood request")
    upazila: Optional[str] = Field(None, description="Upazila of the blood request")
    candidates: List[DonorCandidateSchema] = Field(default_factory=list)
    limit: Optional[int] = Field(None, ge=0, description="Max donors returned (default from settings)")


class MatchResponse(BaseModel):
    """Response for POST /v1/match"""

    blood_type: str
    compatible_types: List[str]
    total_matched: int
    donors: List[DonorCandidateSchema]


class CompatibilityResponse(BaseModel):
    """Response for GET /v1/compatibility/{blood_type}"""

    blood_type: str
    can_receive_from: List[str]
    can_donate_to: List[str]


class EligibilityRequest(BaseModel):
    """Request body for POST /v1/eligibility"""

    last_donation_date: Optional[date] = None
    as_of: Optional[date] = Field(None, description="Reference date (default: today)")


class EligibilityResponse(BaseModel):
    """Response for POST /v1/eligibility"""

    eligible: bool
    next_eligible_date: Optional[date] = None
    days_remaining: int
    message: str


class BadgeSchema(BaseModel):
    """Badge display metadata"""

    id: str
    label: str
    description: str
    icon: str
    min_donations: int


class ScoreRequest(BaseModel):
    """Request body for POST /v1/score"""

    total_donations: int
    is_verified: bool = False
    is_available: bool = False
    has_complete_profile: bool = False


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    points: int
    badges: List[BadgeSchema]


class DonationRequest(BaseModel):
    """Request body for POST /v1/donations"""

    donation_date: date
    total_donations: int = Field(..., description="Donations recorded before this one")
    is_verified: bool = False
    is_available: bool = False
    district: Optional[str] = None
    upazila: Optional[str] = None
    blood_type: Optional[str] = None
    badges: List[str] = Field(default_factory=list, description="Badges already held")


class DonationResponse(BaseModel):
    """Response for POST /v1/donations"""

    total_donations: int
    points: int
    points_awarded: int
    badges: List[BadgeSchema]
    new_badges: List[BadgeSchema]
    last_donation_date: date


class BadgeCatalogResponse(BaseModel):
    """Response for GET /v1/badges"""

    badges: List[BadgeSchema]
