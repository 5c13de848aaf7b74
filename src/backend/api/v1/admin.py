"""
Authority and registrar administration endpoints.

All mutations are restricted to the current election authority.
"""

from fastapi import APIRouter, status

from api.deps import CurrentPrincipal, Service
from schemas.admin import AuthorityResponse, AuthorityTransfer, RegistrarCreate, RegistrarList

router = APIRouter()


def _registrar_list(service) -> RegistrarList:
    return RegistrarList(authority=service.get_authority(), registrars=service.get_registrars())


@router.get("/registrars", response_model=RegistrarList)
async def list_registrars(service: Service) -> RegistrarList:
    return _registrar_list(service)


@router.post("/registrars", response_model=RegistrarList, status_code=status.HTTP_201_CREATED)
async def add_registrar(
    data: RegistrarCreate,
    principal: CurrentPrincipal,
    service: Service,
) -> RegistrarList:
    """Authorize a principal to enroll voters."""
    service.add_registrar(principal, data.principal)
    return _registrar_list(service)


@router.delete("/registrars/{registrar}", response_model=RegistrarList)
async def remove_registrar(
    registrar: str,
    principal: CurrentPrincipal,
    service: Service,
) -> RegistrarList:
    """Revoke a registrar. The authority cannot be removed."""
    service.remove_registrar(principal, registrar)
    return _registrar_list(service)


@router.get("/authority", response_model=AuthorityResponse)
async def get_authority(service: Service) -> AuthorityResponse:
    return AuthorityResponse(authority=service.get_authority())


@router.put("/authority", response_model=AuthorityResponse)
async def transfer_authority(
    data: AuthorityTransfer,
    principal: CurrentPrincipal,
    service: Service,
) -> AuthorityResponse:
    """Hand full administrative control to another principal."""
    previous = service.transfer_authority(principal, data.new_authority)
    return AuthorityResponse(authority=service.get_authority(), previous_authority=previous)
