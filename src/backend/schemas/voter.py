"""
Voter and vote Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class VoterCreate(BaseModel):
    """Schema for enrolling a voter."""

    principal: str = Field(..., max_length=256, description="Principal identifier of the voter")


class VoterStatus(BaseModel):
    """Registration and voting status of a principal."""

    principal: str
    is_registered: bool
    has_voted: bool
    voted_candidate_id: Optional[int] = None
    registration_time: Optional[datetime] = None


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    candidate_id: int


class VoteResponse(BaseModel):
    """Response after successfully casting a vote."""

    success: bool
    message: str
    candidate_id: int
