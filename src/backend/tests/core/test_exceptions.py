"""
Tests for the error hierarchy.
"""

import pytest

from core.exceptions import (
    AlreadyDoneError,
    AlreadyRegistered,
    AlreadyVoted,
    ElectionError,
    ElectionNotInVotingPeriod,
    ErrorKind,
    InvalidCandidate,
    NotFoundError,
    VoterNotRegistered,
)


@pytest.mark.unit
class TestErrorKinds:
    @pytest.mark.parametrize(
        "error, kind",
        [
            (VoterNotRegistered(), ErrorKind.UNAUTHORIZED),
            (ElectionNotInVotingPeriod(), ErrorKind.TIMING_VIOLATION),
            (AlreadyVoted(), ErrorKind.ALREADY_DONE),
            (AlreadyRegistered(), ErrorKind.ALREADY_DONE),
            (InvalidCandidate(), ErrorKind.INVALID_INPUT),
            (NotFoundError("missing"), ErrorKind.NOT_FOUND),
        ],
    )
    def test_named_errors_carry_kind(self, error: ElectionError, kind: ErrorKind) -> None:
        assert error.kind == kind
        assert isinstance(error, ElectionError)

    def test_already_voted_is_already_done(self) -> None:
        assert issubclass(AlreadyVoted, AlreadyDoneError)

    def test_to_dict(self) -> None:
        assert AlreadyVoted().to_dict() == {
            "error": "already_done",
            "detail": "Voter has already cast a vote",
        }
