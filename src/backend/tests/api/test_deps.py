"""
Tests for API authentication dependencies.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from core.security import create_access_token


@pytest.mark.unit
class TestPrincipalDependency:
    async def test_missing_token_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/api/v1/votes", json={"candidate_id": 0})
        assert response.status_code in [401, 403]

    async def test_invalid_token_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/v1/votes",
            json={"candidate_id": 0},
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert response.status_code == 401

    async def test_expired_token_rejected(self, client: AsyncClient) -> None:
        token = create_access_token("voter-1", expires_delta=timedelta(minutes=-1))
        response = await client.post(
            "/api/v1/votes",
            json={"candidate_id": 0},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401

    async def test_null_principal_token_rejected(self, client: AsyncClient, auth_headers) -> None:
        response = await client.post(
            "/api/v1/votes",
            json={"candidate_id": 0},
            headers=auth_headers("0x0000000000000000000000000000000000000000"),
        )
        assert response.status_code == 401
