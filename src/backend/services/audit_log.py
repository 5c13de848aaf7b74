"""
Append-only audit log of election events.

Every successful state transition is recorded here with a strictly
increasing sequence number and mirrored to the structured log, so the full
history of an election can be replayed for audit.
"""

import threading
from datetime import datetime
from typing import Any, Optional

import structlog

from models.event import ElectionEvent, ElectionEventType

logger = structlog.get_logger(__name__)


class AuditLog:
    """In-process event sink. Entries are frozen and never removed."""

    def __init__(self) -> None:
        self._events: list[ElectionEvent] = []
        self._lock = threading.Lock()

    def record(
        self,
        event_type: ElectionEventType,
        occurred_at: datetime,
        generation: int,
        actor: str,
        **payload: Any,
    ) -> ElectionEvent:
        """Append an event and emit it to the structured log."""
        with self._lock:
            event = ElectionEvent(
                sequence=len(self._events) + 1,
                event_type=event_type,
                occurred_at=occurred_at,
                generation=generation,
                actor=actor,
                payload=payload,
            )
            self._events.append(event)

        logger.info(
            "election_event",
            event_type=event_type.value,
            sequence=event.sequence,
            generation=generation,
            actor=actor,
            occurred_at=occurred_at.isoformat(),
            **payload,
        )
        return event

    def list_events(
        self,
        since_sequence: int = 0,
        event_type: Optional[ElectionEventType] = None,
        limit: Optional[int] = None,
    ) -> list[ElectionEvent]:
        """Events with a sequence greater than since_sequence, oldest first."""
        with self._lock:
            events = [e for e in self._events if e.sequence > since_sequence]
        if event_type is not None:
            events = [e for e in events if e.event_type == event_type]
        if limit is not None:
            events = events[:limit]
        return events

    @property
    def last_sequence(self) -> int:
        with self._lock:
            return len(self._events)
