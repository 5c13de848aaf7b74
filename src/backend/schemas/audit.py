"""
Audit log schemas.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class AuditEvent(BaseModel):
    """A single recorded state transition."""

    sequence: int
    event_type: str
    occurred_at: datetime
    generation: int
    actor: str
    payload: dict[str, Any] = Field(default_factory=dict)


class AuditEventPage(BaseModel):
    events: list[AuditEvent]
    last_sequence: int
