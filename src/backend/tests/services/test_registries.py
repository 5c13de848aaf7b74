"""
Tests for candidate and voter enrollment.
"""

from datetime import timedelta

import pytest

from conftest import AUTHORITY, ELECTION_START, REGISTRAR
from core.exceptions import (
    AlreadyRegistered,
    ErrorKind,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    TimingViolationError,
    UnauthorizedError,
)


@pytest.mark.unit
class TestRegisterCandidate:
    """Test candidate enrollment."""

    def test_register_at_creation_instant_succeeds(self, service) -> None:
        service.create_election(AUTHORITY, "General", "", 24)

        first = service.register_candidate(AUTHORITY, "Alice", "Blue", "Lower fees")
        second = service.register_candidate(AUTHORITY, "Bob", "Green", "")

        assert (first.id, second.id) == (0, 1)
        assert first.vote_count == 0
        assert first.is_active is True
        assert service.get_all_candidates() == [0, 1]
        assert service.get_election_details().candidate_ids == [0, 1]

    def test_register_one_second_later_fails(self, service, clock) -> None:
        service.create_election(AUTHORITY, "General", "", 24)
        clock.advance(seconds=1)

        with pytest.raises(TimingViolationError) as exc_info:
            service.register_candidate(AUTHORITY, "Alice", "Blue", "")
        assert exc_info.value.kind == ErrorKind.TIMING_VIOLATION
        assert service.get_all_candidates() == []

    def test_register_without_election_fails(self, service) -> None:
        with pytest.raises(InvalidStateError):
            service.register_candidate(AUTHORITY, "Alice", "Blue", "")

    def test_register_on_paused_election_fails(self, service) -> None:
        service.create_election(AUTHORITY, "General", "", 24)
        service.emergency_pause(AUTHORITY)
        with pytest.raises(InvalidStateError):
            service.register_candidate(AUTHORITY, "Alice", "Blue", "")

    def test_register_requires_authority(self, service) -> None:
        service.create_election(AUTHORITY, "General", "", 24)
        service.add_registrar(AUTHORITY, REGISTRAR)
        with pytest.raises(UnauthorizedError):
            service.register_candidate(REGISTRAR, "Alice", "Blue", "")

    def test_register_rejects_empty_name(self, service) -> None:
        service.create_election(AUTHORITY, "General", "", 24)
        with pytest.raises(InvalidInputError):
            service.register_candidate(AUTHORITY, "  ", "Blue", "")

    def test_returned_record_is_detached(self, service) -> None:
        service.create_election(AUTHORITY, "General", "", 24)
        candidate = service.register_candidate(AUTHORITY, "Alice", "Blue", "")
        candidate.vote_count = 100
        assert service.get_candidate_details(0).vote_count == 0


@pytest.mark.unit
class TestCandidateQueries:
    def test_unknown_id_not_found(self, open_election) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            open_election.get_candidate_details(2)
        assert exc_info.value.kind == ErrorKind.NOT_FOUND

    def test_details(self, open_election) -> None:
        bob = open_election.get_candidate_details(1)
        assert (bob.name, bob.party, bob.manifesto) == ("Bob", "Green", "More parks")


@pytest.mark.unit
class TestRegisterVoter:
    """Test voter enrollment."""

    def test_registrar_registers_voter(self, open_election, clock) -> None:
        clock.advance(minutes=10)
        voter = open_election.register_voter(REGISTRAR, "voter-a")

        assert voter.is_registered is True
        assert voter.has_voted is False
        assert voter.registration_time == ELECTION_START + timedelta(minutes=10)
        assert open_election.get_voting_stats().registered_voters == 1

    def test_authority_is_implicit_registrar(self, open_election) -> None:
        open_election.register_voter(AUTHORITY, "voter-a")
        assert open_election.get_voter_status("voter-a").is_registered is True

    def test_unauthorized_caller_rejected(self, open_election) -> None:
        with pytest.raises(UnauthorizedError):
            open_election.register_voter("voter-x", "voter-a")
        assert open_election.get_voting_stats().registered_voters == 0

    def test_duplicate_registration_rejected(self, open_election) -> None:
        open_election.register_voter(REGISTRAR, "voter-a")
        with pytest.raises(AlreadyRegistered) as exc_info:
            open_election.register_voter(AUTHORITY, "voter-a")
        assert exc_info.value.kind == ErrorKind.ALREADY_DONE
        assert open_election.get_voting_stats().registered_voters == 1

    @pytest.mark.parametrize("principal", ["", "   ", "0x0", "0x0000000000000000000000000000000000000000"])
    def test_null_principal_rejected(self, open_election, principal: str) -> None:
        with pytest.raises(InvalidInputError):
            open_election.register_voter(REGISTRAR, principal)

    def test_registration_works_without_election(self, service) -> None:
        service.register_voter(AUTHORITY, "early-voter")
        assert service.get_voter_status("early-voter").is_registered is True

    def test_unknown_principal_status_is_zero_valued(self, open_election) -> None:
        status = open_election.get_voter_status("never-registered")
        assert status.is_registered is False
        assert status.has_voted is False
        assert status.voted_candidate_id is None
        assert status.registration_time is None
