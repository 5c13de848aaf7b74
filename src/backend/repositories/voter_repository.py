"""
Voter repository over the in-memory election ledger.

Voter records are keyed by principal identifier and persist across
election generations.
"""

from dataclasses import replace
from datetime import datetime
from typing import Optional

from models.ledger import ElectionLedgerState
from models.voter import Voter


class VoterRepository:
    """Repository for voter registration and voting status."""

    def __init__(self, state: ElectionLedgerState):
        self.state = state

    def get(self, principal: str) -> Optional[Voter]:
        return self.state.voters.get(principal)

    def is_registered(self, principal: str) -> bool:
        voter = self.get(principal)
        return bool(voter and voter.is_registered)

    def has_voted(self, principal: str) -> bool:
        voter = self.get(principal)
        return bool(voter and voter.has_voted)

    def register(self, principal: str, registered_at: datetime) -> Voter:
        """Create a registered voter record and bump the registered count."""
        voter = Voter(
            is_registered=True,
            has_voted=False,
            voted_candidate_id=None,
            registration_time=registered_at,
        )
        self.state.voters[principal] = voter
        self.state.registered_voters_count += 1
        return voter

    def mark_voted(self, principal: str, candidate_id: int) -> Voter:
        """Record the vote; has_voted only ever moves from False to True."""
        voter = self.state.voters[principal]
        voter.has_voted = True
        voter.voted_candidate_id = candidate_id
        return voter

    def snapshot(self, principal: str) -> Voter:
        """Detached copy of a voter, zero-valued for unknown principals."""
        voter = self.get(principal)
        return replace(voter) if voter else Voter.unregistered()

    def count_registered(self) -> int:
        return self.state.registered_voters_count
