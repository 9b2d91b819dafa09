# Event API: create, query, update, delete

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from crowdvibe.context import RequestContext, get_request_context
from crowdvibe.crud.event_crud import (
    delete_event,
    get_all_events,
    get_event_by_id,
    get_events_by_name,
    get_events_by_profile_id,
    get_events_by_start_date_time,
    get_events_in_bbox,
    insert_event,
    update_event,
)
from crowdvibe.database import get_db
from crowdvibe.errors import ArgumentError, CrowdVibeError
from crowdvibe.models.event import Event
from crowdvibe.schemas.common import Reply, reply
from crowdvibe.schemas.event import EventIn, EventOut

router = APIRouter(prefix="/events", tags=["Events"])


def event_to_data(event: Event) -> dict:
    return EventOut.model_validate(event).model_dump(mode="json", by_alias=True)


def require_event(db: Session, event_id: Any) -> Event:
    event = get_event_by_id(db, event_id)
    if event is None:
        raise ArgumentError("event does not exist", 404)
    return event


def require_owner(event: Event, ctx: RequestContext) -> None:
    profile_id = ctx.require_profile("you must be logged in to modify an event")
    if event.profile_id != profile_id:
        raise ArgumentError("you are not allowed to modify this event", 403)


@router.post("", response_model=Reply)
def create_event(
    body: EventIn,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """Create an event owned by the calling profile."""
    profile_id = ctx.require_profile("you must be logged in to create an event")
    try:
        event = Event(profile_id=profile_id, **body.model_dump())
        insert_event(db, event)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(event_to_data(event), "Event created OK")


@router.get("", response_model=Reply)
def list_events(
    name: Optional[str] = Query(None),
    profile_id: Optional[str] = Query(None, alias="profileId"),
    start_from: Optional[str] = Query(None, alias="startFrom"),
    start_to: Optional[str] = Query(None, alias="startTo"),
    min_lat: Optional[float] = Query(None, alias="minLat"),
    min_lng: Optional[float] = Query(None, alias="minLong"),
    max_lat: Optional[float] = Query(None, alias="maxLat"),
    max_lng: Optional[float] = Query(None, alias="maxLong"),
    db: Session = Depends(get_db),
) -> Reply:
    """
    One filter per request, checked in this order: name, profileId,
    startFrom/startTo, bounding box. No filter → every event.
    """
    bbox = (min_lat, min_lng, max_lat, max_lng)
    if name is not None:
        events = get_events_by_name(db, name)
    elif profile_id is not None:
        events = get_events_by_profile_id(db, profile_id)
    elif start_from is not None or start_to is not None:
        events = get_events_by_start_date_time(db, start_from, start_to)
    elif any(v is not None for v in bbox):
        if any(v is None for v in bbox):
            raise ArgumentError("bounding box needs minLat, minLong, maxLat and maxLong")
        events = get_events_in_bbox(db, *bbox)
    else:
        events = get_all_events(db)
    return reply([event_to_data(e) for e in events])


@router.get("/{event_id}", response_model=Reply)
def get_event(event_id: str, db: Session = Depends(get_db)) -> Reply:
    event = get_event_by_id(db, event_id)
    return reply(event_to_data(event) if event is not None else None)


@router.put("/{event_id}", response_model=Reply)
def put_event(
    event_id: str,
    body: EventIn,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """Owner only. Every field is overwritten; the owner stays the same."""
    existing = require_event(db, event_id)
    require_owner(existing, ctx)
    try:
        event = update_event(db, Event(id=existing.id, profile_id=existing.profile_id, **body.model_dump()))
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(event_to_data(event), "Event updated OK")


@router.delete("/{event_id}", response_model=Reply)
def remove_event(
    event_id: str,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    event = require_event(db, event_id)
    require_owner(event, ctx)
    try:
        delete_event(db, event)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(message="Event deleted OK")
