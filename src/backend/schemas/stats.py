"""
Voting statistics schemas.
"""

from pydantic import BaseModel


class FormattedStats(BaseModel):
    """Formatted statistics for display."""
    registered_voters: str
    votes_cast: str
    turnout: str

    class Config:
        json_schema_extra = {
            "example": {
                "registered_voters": "12.5K",
                "votes_cast": "7.3K",
                "turnout": "58%",
            }
        }


class VotingStatsResponse(BaseModel):
    """Registration and turnout figures."""
    registered_voters: int
    votes_cast: int
    turnout_percentage: int
    formatted: FormattedStats
