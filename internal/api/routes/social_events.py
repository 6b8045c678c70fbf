"""Social event API routes."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from internal.model import SocialEvent
from internal.social_event import ISocialEventUseCase
from ..dependencies import get_events
from ..schemas import SocialEventRequest

router = APIRouter()


@router.get("/social-events")
async def list_social_events(
    limit: Optional[int] = Query(default=None, ge=1, le=10000),
    events: ISocialEventUseCase = Depends(get_events),
) -> List[Dict[str, Any]]:
    """Stored events, newest first."""
    return [e.to_dict() for e in await events.get_all(limit=limit)]


@router.post("/social-events", status_code=status.HTTP_201_CREATED)
async def create_social_event(
    body: SocialEventRequest,
    events: ISocialEventUseCase = Depends(get_events),
) -> Dict[str, Any]:
    event = SocialEvent.parse(body.model_dump())
    inserted = await events.store(event.platform, event)
    return {"success": True, "inserted": inserted, "event": event.to_dict()}
