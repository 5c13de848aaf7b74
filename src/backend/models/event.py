"""
Audit events emitted by state-changing election operations.

Events are immutable once recorded and carry enough fields to reconstruct
the state transition they describe.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class ElectionEventType(str, Enum):
    ELECTION_CREATED = "ElectionCreated"
    CANDIDATE_REGISTERED = "CandidateRegistered"
    VOTER_REGISTERED = "VoterRegistered"
    VOTE_CAST = "VoteCast"
    ELECTION_ENDED = "ElectionEnded"
    RESULTS_PUBLISHED = "ResultsPublished"
    ELECTION_PAUSED = "ElectionPaused"
    ELECTION_RESUMED = "ElectionResumed"
    REGISTRAR_ADDED = "RegistrarAdded"
    REGISTRAR_REMOVED = "RegistrarRemoved"
    AUTHORITY_TRANSFERRED = "AuthorityTransferred"


@dataclass(frozen=True)
class ElectionEvent:
    """A single entry in the append-only audit log."""

    sequence: int
    event_type: ElectionEventType
    occurred_at: datetime
    generation: int
    actor: str
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sequence": self.sequence,
            "event_type": self.event_type.value,
            "occurred_at": self.occurred_at.isoformat(),
            "generation": self.generation,
            "actor": self.actor,
            "payload": dict(self.payload),
        }


def serialize_time(moment: Optional[datetime]) -> Optional[str]:
    return moment.isoformat() if moment else None
