"""
Candidate registry endpoints.
"""

from fastapi import APIRouter, status

from api.deps import CurrentPrincipal, Service
from schemas.candidate import Candidate, CandidateCreate, CandidateIdList
from schemas.converters import candidate_model_to_schema

router = APIRouter()


@router.post("", response_model=Candidate, status_code=status.HTTP_201_CREATED)
async def register_candidate(
    data: CandidateCreate,
    principal: CurrentPrincipal,
    service: Service,
) -> Candidate:
    """Register a candidate (authority only, before voting opens)."""
    candidate = service.register_candidate(principal, data.name, data.party, data.manifesto)
    return candidate_model_to_schema(candidate)


@router.get("", response_model=CandidateIdList)
async def get_all_candidates(service: Service) -> CandidateIdList:
    """Candidate ids of the current election, in registration order."""
    return CandidateIdList(candidate_ids=service.get_all_candidates())


@router.get("/details", response_model=list[Candidate])
async def list_candidates(service: Service) -> list[Candidate]:
    """Full candidate records of the current election, in registration order."""
    return [candidate_model_to_schema(c) for c in service.list_candidates()]


@router.get("/{candidate_id}", response_model=Candidate)
async def get_candidate_details(candidate_id: int, service: Service) -> Candidate:
    return candidate_model_to_schema(service.get_candidate_details(candidate_id))
