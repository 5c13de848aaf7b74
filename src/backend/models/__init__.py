"""Election domain models."""

from models.authorization import AuthorizationSet
from models.candidate import Candidate
from models.election import Election, LifecycleState
from models.event import ElectionEvent, ElectionEventType
from models.ledger import ElectionLedgerState
from models.voter import Voter

__all__ = [
    "AuthorizationSet",
    "Candidate",
    "Election",
    "LifecycleState",
    "ElectionEvent",
    "ElectionEventType",
    "ElectionLedgerState",
    "Voter",
]
