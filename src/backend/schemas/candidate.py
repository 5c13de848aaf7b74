"""
Candidate-related Pydantic schemas.
"""

from pydantic import BaseModel, Field


class CandidateCreate(BaseModel):
    """Schema for registering a candidate."""

    name: str = Field(..., max_length=200)
    party: str = Field("", max_length=200)
    manifesto: str = Field("", max_length=20000)


class Candidate(BaseModel):
    """Candidate details."""

    id: int
    name: str
    party: str
    manifesto: str
    vote_count: int
    is_active: bool

    model_config = {"from_attributes": True}


class CandidateIdList(BaseModel):
    """Candidate ids in registration order."""

    candidate_ids: list[int]
