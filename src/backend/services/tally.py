"""
Winner computation for a closed election.
"""

from dataclasses import dataclass
from typing import Mapping, Sequence

from models.candidate import Candidate


@dataclass(frozen=True)
class TallyResult:
    winner_candidate_id: int
    winner_votes: int
    winner_name: str
    total_votes: int


def compute_winner(
    candidate_ids: Sequence[int],
    candidates: Mapping[int, Candidate],
) -> TallyResult:
    """
    Pick the winner by scanning candidates in registration order.

    A candidate only takes the lead with a strictly greater count, so ties
    go to the earliest-registered candidate that reached the maximum. With no
    votes at all the winner defaults to id 0, whether or not a candidate with
    that id exists in this generation.
    """
    max_votes = 0
    winner_id = 0
    total = 0
    for candidate_id in candidate_ids:
        votes = candidates[candidate_id].vote_count
        total += votes
        if votes > max_votes:
            max_votes = votes
            winner_id = candidate_id

    winner = candidates.get(winner_id)
    return TallyResult(
        winner_candidate_id=winner_id,
        winner_votes=max_votes,
        winner_name=winner.name if winner else "",
        total_votes=total,
    )
