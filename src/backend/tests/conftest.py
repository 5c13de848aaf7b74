"""
Pytest fixtures for ElectionLedger backend tests.
"""

import os
from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing")
os.environ.setdefault("ELECTION_AUTHORITY", "authority")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "false")

AUTHORITY = os.environ["ELECTION_AUTHORITY"]
REGISTRAR = "registrar-1"
ELECTION_START = datetime(2026, 3, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def clock() -> Any:
    """Frozen clock positioned at the election start instant."""
    from core.clock import FrozenClock

    return FrozenClock(ELECTION_START)


@pytest.fixture
def service(clock: Any) -> Any:
    """Fresh election service with the test authority and a frozen clock."""
    from services.election_service import ElectionService

    return ElectionService(authority=AUTHORITY, clock=clock)


@pytest.fixture
def open_election(service: Any) -> Any:
    """
    Service with a 24 hour election created at ELECTION_START, two candidates
    (ids 0 and 1) and a registrar.
    """
    service.create_election(AUTHORITY, "Board election", "Annual board vote", 24)
    service.register_candidate(AUTHORITY, "Alice", "Blue", "Lower fees")
    service.register_candidate(AUTHORITY, "Bob", "Green", "More parks")
    service.add_registrar(AUTHORITY, REGISTRAR)
    return service


@pytest.fixture
def register_voters(open_election: Any) -> Callable[[int], list[str]]:
    """Register ``count`` voters through the registrar and return their principals."""

    def _register(count: int, prefix: str = "voter") -> list[str]:
        principals = [f"{prefix}-{i}" for i in range(count)]
        for principal in principals:
            open_election.register_voter(REGISTRAR, principal)
        return principals

    return _register


@pytest.fixture
def app(service: Any) -> Any:
    """FastAPI application wired to the per-test election service."""
    from api.deps import get_service
    from main import app as fastapi_app

    fastapi_app.dependency_overrides[get_service] = lambda: service
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Build bearer headers for a principal."""
    from core.security import create_access_token

    def _headers(principal: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(principal)}"}

    return _headers
