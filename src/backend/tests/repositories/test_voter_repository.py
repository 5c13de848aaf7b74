"""
Tests for the voter repository.
"""

from datetime import datetime, timezone

import pytest

from models.authorization import AuthorizationSet
from models.ledger import ElectionLedgerState
from repositories.voter_repository import VoterRepository

REGISTERED_AT = datetime(2026, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def state() -> ElectionLedgerState:
    return ElectionLedgerState(authorization=AuthorizationSet(authority="authority"))


@pytest.mark.unit
class TestVoterRepository:
    def test_register_creates_record_and_counts(self, state) -> None:
        repo = VoterRepository(state)
        voter = repo.register("v1", registered_at=REGISTERED_AT)

        assert voter.is_registered is True
        assert voter.has_voted is False
        assert voter.registration_time == REGISTERED_AT
        assert repo.count_registered() == 1
        assert repo.is_registered("v1") is True
        assert repo.is_registered("v2") is False

    def test_mark_voted(self, state) -> None:
        repo = VoterRepository(state)
        repo.register("v1", registered_at=REGISTERED_AT)

        repo.mark_voted("v1", 3)

        assert repo.has_voted("v1") is True
        assert repo.get("v1").voted_candidate_id == 3

    def test_snapshot_of_unknown_principal_is_zero_valued(self, state) -> None:
        voter = VoterRepository(state).snapshot("nobody")
        assert voter.is_registered is False
        assert voter.has_voted is False
        assert voter.voted_candidate_id is None

