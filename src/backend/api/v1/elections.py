"""
Election lifecycle endpoints.

Creation, emergency pause/resume, closing and publication are restricted to
the election authority; details and published results are public.
"""

import structlog
from fastapi import APIRouter, status

from api.deps import CurrentPrincipal, Service
from schemas.converters import election_model_to_schema, results_to_schema, tally_to_schema
from schemas.election import Election, ElectionCreate, ElectionResults, TallyResponse

logger = structlog.get_logger(__name__)

router = APIRouter()


def _current(service) -> Election:
    return election_model_to_schema(service.get_election_details(), service.get_lifecycle_state())


@router.post("", response_model=Election, status_code=status.HTTP_201_CREATED)
async def create_election(
    data: ElectionCreate,
    principal: CurrentPrincipal,
    service: Service,
) -> Election:
    """
    Create a new election.

    Discards the previous candidate set and vote counters. Only allowed when
    no election is active or the active one's window has elapsed.
    """
    service.create_election(principal, data.title, data.description, data.duration_hours)
    return _current(service)


@router.get("/current", response_model=Election)
async def get_election_details(service: Service) -> Election:
    """Get the current election record and its lifecycle state."""
    return _current(service)


@router.post("/current/pause", response_model=Election)
async def emergency_pause(principal: CurrentPrincipal, service: Service) -> Election:
    """Stop voting immediately without touching tallies."""
    service.emergency_pause(principal)
    logger.warning("election_paused_via_api", caller=principal)
    return _current(service)


@router.post("/current/resume", response_model=Election)
async def emergency_resume(principal: CurrentPrincipal, service: Service) -> Election:
    """Lift an emergency pause while the voting window is still open."""
    service.emergency_resume(principal)
    return _current(service)


@router.post("/current/end", response_model=TallyResponse)
async def end_election(principal: CurrentPrincipal, service: Service) -> TallyResponse:
    """Close the election after its window and compute the winner."""
    return tally_to_schema(service.end_election(principal))


@router.post("/current/publish", response_model=ElectionResults)
async def publish_results(principal: CurrentPrincipal, service: Service) -> ElectionResults:
    """Publish the computed results."""
    return results_to_schema(service.publish_results(principal))


@router.get("/current/results", response_model=ElectionResults)
async def get_election_results(service: Service) -> ElectionResults:
    """Get published results. Fails until the election is closed and published."""
    return results_to_schema(service.get_election_results())
