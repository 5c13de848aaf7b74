"""
Candidate repository over the in-memory election ledger.

Candidate ids are assigned sequentially from the ledger's candidate counter
and appended to the election's candidate-id sequence, whose order is used
to break ties at tally time.
"""

from dataclasses import replace
from typing import Optional

from models.candidate import Candidate
from models.ledger import ElectionLedgerState


class CandidateRepository:
    """Repository for candidate records of the current generation."""

    def __init__(self, state: ElectionLedgerState):
        self.state = state

    def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        """Get a candidate of the current generation, or None."""
        if candidate_id < 0 or candidate_id >= self.state.candidate_counter:
            return None
        return self.state.candidates.get(candidate_id)

    def create(self, name: str, party: str, manifesto: str) -> Candidate:
        """Store a new candidate under the next sequential id."""
        candidate_id = self.state.candidate_counter
        candidate = Candidate(
            id=candidate_id,
            name=name,
            party=party,
            manifesto=manifesto,
        )
        self.state.candidates[candidate_id] = candidate
        self.state.election.candidate_ids.append(candidate_id)
        self.state.candidate_counter = candidate_id + 1
        return candidate

    def increment_vote_count(self, candidate_id: int) -> int:
        """Add one vote to a candidate and return the new count."""
        candidate = self.state.candidates[candidate_id]
        candidate.vote_count += 1
        return candidate.vote_count

    def clear_generation(self) -> int:
        """Drop every candidate of the previous generation and reset the counter."""
        cleared = len(self.state.candidates)
        self.state.candidates.clear()
        self.state.candidate_counter = 0
        return cleared

    def list_ids(self) -> list[int]:
        """Candidate ids in registration order."""
        return list(self.state.election.candidate_ids)

    def list_all(self) -> list[Candidate]:
        return [self.state.candidates[cid] for cid in self.state.election.candidate_ids]

    def snapshot(self, candidate_id: int) -> Optional[Candidate]:
        """Detached copy of a candidate, safe to hand outside the lock."""
        candidate = self.get_by_id(candidate_id)
        return replace(candidate) if candidate else None

    def total_votes(self) -> int:
        return sum(c.vote_count for c in self.state.candidates.values())
