"""
Election-related Pydantic schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class LifecycleStateEnum(str, Enum):
    """Election lifecycle state."""

    NO_ELECTION = "no_election"
    PRE_VOTING = "pre_voting"
    VOTING = "voting"
    PAUSED = "paused"
    AWAITING_CLOSE = "awaiting_close"
    CLOSED = "closed"
    PUBLISHED = "published"


class ElectionCreate(BaseModel):
    """Schema for creating a new election."""

    # Emptiness and positivity are checked by the service so the caller
    # receives the matching error kind.
    title: str = Field(..., max_length=200)
    description: str = Field("", max_length=5000)
    duration_hours: int = Field(..., description="Length of the voting window in hours")


class Election(BaseModel):
    """Election details as exposed to clients."""

    title: str
    description: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    is_active: bool
    results_published: bool
    candidate_ids: list[int]
    total_votes: int
    winner_candidate_id: int
    generation: int
    state: LifecycleStateEnum


class TallyResponse(BaseModel):
    """Outcome of closing an election."""

    winner_candidate_id: int
    winner_name: str
    winner_votes: int
    total_votes: int


class CandidateResult(BaseModel):
    candidate_id: int
    name: str
    party: str
    vote_count: int


class ElectionResults(BaseModel):
    """Published election results."""

    title: str
    winner_candidate_id: int
    winner_name: str
    winner_votes: int
    total_votes: int
    candidates: list[CandidateResult] = Field(
        default_factory=list, description="Per-candidate tallies in registration order"
    )
