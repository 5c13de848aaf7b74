"""
Voting statistics API endpoint.

Public registration and turnout figures for the current election.
"""

from fastapi import APIRouter

from api.deps import Service
from schemas.stats import FormattedStats, VotingStatsResponse
from services.stats_service import format_stat_value

router = APIRouter()


@router.get(
    "",
    response_model=VotingStatsResponse,
    summary="Get voting statistics",
    description="""
    Returns registered voters, votes cast in the current election and the
    turnout percentage (rounded down, 0 when nobody is registered).

    **No authentication required** - these are public statistics.
    """,
)
async def get_voting_stats(service: Service) -> VotingStatsResponse:
    stats = service.get_voting_stats()
    return VotingStatsResponse(
        registered_voters=stats.registered_voters,
        votes_cast=stats.votes_cast,
        turnout_percentage=stats.turnout_percentage,
        formatted=FormattedStats(
            registered_voters=format_stat_value(stats.registered_voters),
            votes_cast=format_stat_value(stats.votes_cast),
            turnout=f"{stats.turnout_percentage}%",
        ),
    )
