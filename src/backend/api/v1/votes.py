"""
Vote casting endpoint.

Only registered voters can vote, once, and only while the election is
active and inside its voting window.
"""

from fastapi import APIRouter, status

from api.deps import CurrentPrincipal, Service
from schemas.voter import VoteCreate, VoteResponse

router = APIRouter()


@router.post("", response_model=VoteResponse, status_code=status.HTTP_201_CREATED)
async def cast_vote(
    vote_data: VoteCreate,
    principal: CurrentPrincipal,
    service: Service,
) -> VoteResponse:
    """Cast the caller's vote for a candidate of the current election."""
    voter = service.cast_vote(principal, vote_data.candidate_id)
    return VoteResponse(
        success=True,
        message="Vote recorded successfully",
        candidate_id=voter.voted_candidate_id,
    )
