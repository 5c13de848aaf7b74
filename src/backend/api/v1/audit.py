"""
Audit log endpoint.

Read-only, sequence-ordered view of every recorded state transition.
Clients poll with ``since`` set to the last sequence they have seen.
"""

from typing import Optional

from fastapi import APIRouter, Query

from api.deps import Service
from models.event import ElectionEventType
from schemas.audit import AuditEventPage
from schemas.converters import event_to_schema

router = APIRouter()


@router.get("/events", response_model=AuditEventPage)
async def list_events(
    service: Service,
    since: int = Query(0, ge=0, description="Return events after this sequence number"),
    event_type: Optional[ElectionEventType] = Query(None, description="Only return events of this type"),
    limit: int = Query(100, ge=1, le=1000),
) -> AuditEventPage:
    events = service.list_events(since_sequence=since, event_type=event_type, limit=limit)
    return AuditEventPage(
        events=[event_to_schema(e) for e in events],
        last_sequence=service.audit_log.last_sequence,
    )
