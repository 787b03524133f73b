"""
Event endpoints.

Public listing accepts ``?status=`` (``all`` for no filter); event
detail pages are addressed by slug.  Admin writes use the numeric id.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status as http_status

from pan_eventz_api.app.api.deps import get_event_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import EVENTS_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.event import EventCreate, EventUpdate
from pan_eventz_api.app.services.base import wants_filter
from pan_eventz_api.app.services.event_service import EventService


router = APIRouter()


@router.get("")
async def list_events(
    status: Optional[str] = None,
    service: EventService = Depends(get_event_service),
) -> List[Dict[str, Any]]:
    def narrow(events: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if wants_filter(status):
            return [event for event in events if event["status"].lower() == status.lower()]
        return events

    return await with_fallback(lambda: service.list_items(status), EVENTS_FALLBACK, "events", narrow=narrow)


@router.get("/{slug}")
async def get_event(slug: str, service: EventService = Depends(get_event_service)) -> Dict[str, Any]:
    event = await service.get_by_slug(slug)
    if event is None:
        raise HTTPException(status_code=http_status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_event(
    event_in: EventCreate,
    service: EventService = Depends(get_event_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Create an event (admin only)."""
    with write_errors("Failed to create event"):
        return await service.create_item(event_in.to_record())


@router.put("/{event_id}")
async def update_event(
    event_id: int,
    event_in: EventUpdate,
    service: EventService = Depends(get_event_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Update an event (admin only)."""
    with write_errors("Failed to update event"):
        event = await service.update_item(event_id, event_in.to_record(partial=True))
    if event is None:
        raise HTTPException(status_code=http_status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.delete("/{event_id}")
async def delete_event(
    event_id: int,
    service: EventService = Depends(get_event_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    """Delete an event (admin only)."""
    with write_errors("Failed to delete event", http_status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(event_id)
    if not deleted:
        raise HTTPException(status_code=http_status.HTTP_404_NOT_FOUND, detail="Event not found")
    return {"message": "Event deleted successfully"}
