"""
Election singleton record and its lifecycle states.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class LifecycleState(str, Enum):
    """Derived lifecycle state of the election."""

    NO_ELECTION = "no_election"  # Nothing created yet
    PRE_VOTING = "pre_voting"  # Created, window not yet open
    VOTING = "voting"  # Active and inside [start_time, end_time]
    PAUSED = "paused"  # Emergency-paused before being ended
    AWAITING_CLOSE = "awaiting_close"  # Active but the window has elapsed
    CLOSED = "closed"  # Ended and tallied
    PUBLISHED = "published"  # Results exposed


@dataclass
class Election:
    """
    The one election managed by the service.

    Replaced wholesale by each create_election call. winner_candidate_id is
    only meaningful once the election has been ended (is_tallied).
    """

    title: str = ""
    description: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    is_active: bool = False
    results_published: bool = False
    candidate_ids: list[int] = field(default_factory=list)
    total_votes: int = 0
    winner_candidate_id: int = 0
    is_tallied: bool = False
    generation: int = 0

    @property
    def exists(self) -> bool:
        return self.generation > 0

    def window_contains(self, moment: datetime) -> bool:
        """Check whether a moment lies in the closed voting window."""
        if self.start_time is None or self.end_time is None:
            return False
        return self.start_time <= moment <= self.end_time

    def lifecycle_state(self, now: datetime) -> LifecycleState:
        """Derive the lifecycle state at a given moment."""
        if not self.exists:
            return LifecycleState.NO_ELECTION
        if self.results_published:
            return LifecycleState.PUBLISHED
        if self.is_tallied:
            return LifecycleState.CLOSED
        if not self.is_active:
            return LifecycleState.PAUSED
        if self.start_time is not None and now < self.start_time:
            return LifecycleState.PRE_VOTING
        if self.end_time is not None and now > self.end_time:
            return LifecycleState.AWAITING_CLOSE
        return LifecycleState.VOTING
