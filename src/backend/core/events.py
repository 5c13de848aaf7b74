"""
Application lifecycle event handlers.

Configures logging and brings up the election service on startup.
"""

from typing import Callable

import structlog
from fastapi import FastAPI

from core.config import settings
from core.logging import configure_logging

logger = structlog.get_logger(__name__)


def create_start_app_handler(app: FastAPI) -> Callable:
    """Create startup event handler."""

    async def start_app() -> None:
        configure_logging()
        logger.info("Starting ElectionLedger API...", environment=settings.APP_ENV)

        from api.deps import get_service

        service = app.dependency_overrides.get(get_service, get_service)()
        logger.info(
            "election_service_ready",
            authority=service.get_authority(),
            state=service.get_lifecycle_state().value,
        )

        logger.info("ElectionLedger API started successfully")

    return start_app


def create_stop_app_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler."""

    async def stop_app() -> None:
        logger.info("Shutting down ElectionLedger API...")

        from api.deps import get_service

        service = app.dependency_overrides.get(get_service, get_service)()
        logger.info(
            "election_service_final_state",
            state=service.get_lifecycle_state().value,
            recorded_events=service.audit_log.last_sequence,
        )

        logger.info("ElectionLedger API shutdown complete")

    return stop_app
