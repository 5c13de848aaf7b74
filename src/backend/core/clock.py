"""
Time source for the election lifecycle.

Every window check (candidate enrollment, voting, closing) reads the current
time from an injected Clock instead of calling datetime.now() directly, so the
state machine can be driven deterministically in tests.
"""

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """Abstract source of timezone-aware UTC timestamps."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...


class SystemClock(Clock):
    """Wall clock used in production."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """
    Controllable clock for tests.

    Time never moves unless advanced or set explicitly:

        clock = FrozenClock(datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc))
        clock.advance(hours=1)
    """

    def __init__(self, frozen_at: datetime | None = None) -> None:
        if frozen_at is None:
            frozen_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        if frozen_at.tzinfo is None:
            raise ValueError("FrozenClock requires a timezone-aware datetime")
        self._current = frozen_at.astimezone(timezone.utc)
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._current

    def set_time(self, moment: datetime) -> None:
        """Jump to an arbitrary point in time."""
        if moment.tzinfo is None:
            raise ValueError("FrozenClock requires a timezone-aware datetime")
        with self._lock:
            self._current = moment.astimezone(timezone.utc)

    def advance(self, delta: timedelta | None = None, **kwargs: float) -> datetime:
        """
        Move time forward.

        Accepts either a timedelta or timedelta keyword arguments
        (``advance(seconds=1)``, ``advance(hours=24)``). Returns the new time.
        """
        step = delta if delta is not None else timedelta(**kwargs)
        with self._lock:
            self._current = self._current + step
            return self._current
