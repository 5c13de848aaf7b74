"""
Voter registry endpoints.
"""

from fastapi import APIRouter, status

from api.deps import CurrentPrincipal, Service
from core.security import normalize_principal
from schemas.converters import voter_model_to_schema
from schemas.voter import VoterCreate, VoterStatus

router = APIRouter()


@router.post("", response_model=VoterStatus, status_code=status.HTTP_201_CREATED)
async def register_voter(
    data: VoterCreate,
    principal: CurrentPrincipal,
    service: Service,
) -> VoterStatus:
    """Enroll a voter (authority or registrar). Registration is permanent."""
    voter = service.register_voter(principal, data.principal)
    return voter_model_to_schema(normalize_principal(data.principal), voter)


@router.get("/{voter_principal}", response_model=VoterStatus)
async def get_voter_status(voter_principal: str, service: Service) -> VoterStatus:
    """
    Registration and voting status of a principal.

    Never-registered principals get a zero-valued record instead of a 404.
    """
    key = normalize_principal(voter_principal)
    return voter_model_to_schema(key, service.get_voter_status(key))
