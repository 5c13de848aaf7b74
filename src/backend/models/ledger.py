"""
Aggregate election state.

ElectionLedgerState holds everything the service mutates: the election
record, the candidate and voter tables, the authorization set and the scalar
counters. It is owned by exactly one ElectionService and only touched while
that service holds its write lock.
"""

from dataclasses import dataclass, field

from models.authorization import AuthorizationSet
from models.candidate import Candidate
from models.election import Election
from models.voter import Voter


@dataclass
class ElectionLedgerState:
    authorization: AuthorizationSet
    election: Election = field(default_factory=Election)
    # Cleared on every new election generation
    candidates: dict[int, Candidate] = field(default_factory=dict)
    # Never cleared
    voters: dict[str, Voter] = field(default_factory=dict)
    candidate_counter: int = 0
    registered_voters_count: int = 0
    total_votes_cast: int = 0
