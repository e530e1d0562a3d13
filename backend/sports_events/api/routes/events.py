"""Event Routes — HTTP surface over EventActions.

Invariants:
    - Routes never authorize, validate or query; EventActions does all of it
    - Every response body is the success/failure envelope
    - Writes answer with X-Invalidate-Paths naming the stale page views
    - sport_type=all (or blank) means "no sport filter"
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from sports_events.api.dependencies import (
    get_event_actions, get_invalidations,
)
from sports_events.api.responses import envelope_response
from sports_events.config import Settings, get_settings
from sports_events.core.domain_types import EventFilters
from sports_events.schemas.event import EventCreate, EventResponse, EventUpdate
from sports_events.services.event_actions import EventActions
from sports_events.services.view_invalidation import RequestInvalidations

router = APIRouter(prefix="/api/v1/events", tags=["events"])


def _render_many(records):
    return [EventResponse.from_record(r) for r in records]


@router.get("")
async def list_events(
    search: str | None = Query(None, max_length=255),
    sport_type: str | None = Query(None),
    date_from: datetime | None = Query(None),
    date_to: datetime | None = Query(None),
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    actions: EventActions = Depends(get_event_actions),
    settings: Settings = Depends(get_settings),
):
    """List the caller's events, soonest first."""
    sport = (sport_type or "").strip()
    filters = EventFilters(
        search=search,
        sport_type=None if sport.lower() in ("", "all") else sport,
        date_from=date_from,
        date_to=date_to,
        limit=min(limit, settings.max_page_size) if limit else None,
        offset=offset,
    )
    result = await actions.list_events(filters)
    return envelope_response(result, render=_render_many)


@router.get("/count")
async def count_events(actions: EventActions = Depends(get_event_actions)):
    return envelope_response(await actions.count_events())


@router.get("/{event_id}")
async def get_event(
    event_id: str, actions: EventActions = Depends(get_event_actions),
):
    result = await actions.get_event(event_id)
    return envelope_response(result, render=EventResponse.from_record)


@router.post("")
async def create_event(
    body: EventCreate,
    actions: EventActions = Depends(get_event_actions),
    invalidations: RequestInvalidations = Depends(get_invalidations),
):
    result = await actions.create_event(body.to_fields())
    return envelope_response(
        result,
        render=EventResponse.from_record,
        success_status=status.HTTP_201_CREATED,
        invalidations=invalidations,
    )


@router.patch("/{event_id}")
async def update_event(
    event_id: str,
    body: EventUpdate,
    actions: EventActions = Depends(get_event_actions),
    invalidations: RequestInvalidations = Depends(get_invalidations),
):
    """Partial update: only the fields present in the body change."""
    result = await actions.update_event(event_id, body.to_fields())
    return envelope_response(
        result, render=EventResponse.from_record, invalidations=invalidations,
    )


@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    actions: EventActions = Depends(get_event_actions),
    invalidations: RequestInvalidations = Depends(get_invalidations),
):
    """Delete is idempotent: a missing or foreign id still succeeds."""
    result = await actions.delete_event(event_id)
    return envelope_response(result, invalidations=invalidations)
