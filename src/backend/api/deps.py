"""
Shared dependencies for API endpoints.

Includes:
- Caller principal extraction from the bearer JWT
- Access to the process-wide election service
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.security import decode_token, is_null_principal, normalize_principal
from services.election_service import ElectionService, get_election_service

logger = structlog.get_logger(__name__)

# Security schemes
security = HTTPBearer()


def get_service() -> ElectionService:
    """Election service dependency (overridable in tests)."""
    return get_election_service()


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> str:
    """
    Extract the caller's principal identifier from the JWT ``sub`` claim.

    Raises:
        HTTPException: If the token is invalid or carries no usable principal.
    """
    payload = decode_token(credentials.credentials, expected_type="access")

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    principal = normalize_principal(payload.get("sub"))
    if is_null_principal(principal):
        logger.warning("token_without_principal")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return principal


CurrentPrincipal = Annotated[str, Depends(get_current_principal)]
Service = Annotated[ElectionService, Depends(get_service)]
