"""
Election error hierarchy.

Every rejected operation raises an ElectionError subclass carrying one of the
ErrorKind values below, so callers can react to the exact precondition that
failed rather than a generic fault. Preconditions are always checked before
any state is written, so an exception never leaves partial state behind.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a rejected election operation."""

    UNAUTHORIZED = "unauthorized"  # Caller lacks the required role
    INVALID_STATE = "invalid_state"  # Not valid in the current lifecycle state
    TIMING_VIOLATION = "timing_violation"  # Window/time precondition failed
    INVALID_INPUT = "invalid_input"  # Malformed argument
    ALREADY_DONE = "already_done"  # Already registered / already voted
    NOT_FOUND = "not_found"  # Unknown candidate id


class ElectionError(Exception):
    """Base class for all election operation failures."""

    kind: ErrorKind = ErrorKind.INVALID_STATE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.kind.value, "detail": self.message}


class UnauthorizedError(ElectionError):
    kind = ErrorKind.UNAUTHORIZED


class InvalidStateError(ElectionError):
    kind = ErrorKind.INVALID_STATE


class TimingViolationError(ElectionError):
    kind = ErrorKind.TIMING_VIOLATION


class InvalidInputError(ElectionError):
    kind = ErrorKind.INVALID_INPUT


class AlreadyDoneError(ElectionError):
    kind = ErrorKind.ALREADY_DONE


class NotFoundError(ElectionError):
    kind = ErrorKind.NOT_FOUND


class VoterNotRegistered(UnauthorizedError):
    """Caller tried to vote without being a registered voter."""

    def __init__(self, message: str = "Caller is not a registered voter") -> None:
        super().__init__(message)


class ElectionNotInVotingPeriod(TimingViolationError):
    """Election is paused/closed or the current time is outside the window."""

    def __init__(self, message: str = "Election is not in its voting period") -> None:
        super().__init__(message)


class AlreadyVoted(AlreadyDoneError):
    def __init__(self, message: str = "Voter has already cast a vote") -> None:
        super().__init__(message)


class AlreadyRegistered(AlreadyDoneError):
    def __init__(self, message: str = "Voter is already registered") -> None:
        super().__init__(message)


class InvalidCandidate(InvalidInputError):
    """Candidate id is unknown in this generation or the candidate is inactive."""

    def __init__(self, message: str = "Invalid candidate") -> None:
        super().__init__(message)
