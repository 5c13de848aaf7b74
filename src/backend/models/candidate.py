"""
Candidate record.

Candidates belong to one election generation: ids start at 0 for every new
election and the whole set is discarded when the next election is created.
"""

from dataclasses import dataclass


@dataclass
class Candidate:
    """A candidate standing in the current election."""

    id: int
    name: str
    party: str
    manifesto: str
    vote_count: int = 0
    is_active: bool = True
