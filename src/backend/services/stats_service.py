"""
Voting statistics.

Computes registration and turnout figures from the election ledger. Turnout
is an integer percentage rounded down, and 0 when nobody is registered.
"""

from dataclasses import dataclass

from models.ledger import ElectionLedgerState


@dataclass(frozen=True)
class VotingStats:
    """Voting statistics data."""
    registered_voters: int
    votes_cast: int
    turnout_percentage: int

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "registered_voters": self.registered_voters,
            "votes_cast": self.votes_cast,
            "turnout_percentage": self.turnout_percentage,
        }

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.registered_voters, self.votes_cast, self.turnout_percentage)


def compute_turnout(votes_cast: int, registered_voters: int) -> int:
    """floor(votes_cast * 100 / registered_voters), or 0 with no registered voters."""
    if registered_voters <= 0:
        return 0
    return (votes_cast * 100) // registered_voters


class StatsService:
    """Service for computing voting statistics from the ledger."""

    def __init__(self, state: ElectionLedgerState):
        self.state = state

    def get_stats(self) -> VotingStats:
        registered = self.state.registered_voters_count
        votes_cast = self.state.total_votes_cast
        return VotingStats(
            registered_voters=registered,
            votes_cast=votes_cast,
            turnout_percentage=compute_turnout(votes_cast, registered),
        )


def format_stat_value(value: int) -> str:
    """
    Format a statistic value for display (e.g., 1234567 -> "1.2M").

    Args:
        value: Raw numeric value

    Returns:
        Formatted string for display
    """
    if value >= 1_000_000:
        formatted = value / 1_000_000
        if formatted >= 10:
            return f"{formatted:.0f}M"
        return f"{formatted:.1f}M"
    elif value >= 1_000:
        formatted = value / 1_000
        if formatted >= 10:
            return f"{formatted:.0f}K"
        return f"{formatted:.1f}K"
    else:
        return f"{value:,}"
