"""
Authorization checks for election operations.

Each mutating operation calls exactly one of these as its first statement.
They raise UnauthorizedError (kind ``unauthorized``) and never mutate state.
"""

import structlog

from core.exceptions import UnauthorizedError
from repositories.registrar_repository import RegistrarRepository

logger = structlog.get_logger(__name__)


def require_authority(registrars: RegistrarRepository, caller: str, operation: str) -> None:
    """Ensure the caller is the current election authority."""
    if not registrars.is_authority(caller):
        logger.warning("unauthorized_operation", operation=operation, caller=caller, required="authority")
        raise UnauthorizedError(f"Only the election authority may {operation}")


def require_registrar(registrars: RegistrarRepository, caller: str, operation: str) -> None:
    """Ensure the caller is the authority or an authorized registrar."""
    if not registrars.is_registrar(caller):
        logger.warning("unauthorized_operation", operation=operation, caller=caller, required="registrar")
        raise UnauthorizedError(f"Only the election authority or a registrar may {operation}")
