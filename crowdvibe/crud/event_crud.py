# Event CRUD + lookups (id, owner, start-date range, name, bbox, all)

import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from crowdvibe.crud.common import delete_by_id, fetch_all, fetch_one, flush_or_raise
from crowdvibe.errors import ArgumentError, StorageError
from crowdvibe.models.event import Event
from crowdvibe.validation import (
    format_datetime,
    sanitize_text,
    validate_datetime,
    validate_float,
    validate_uuid,
)

logger = logging.getLogger(__name__)


def insert_event(db: Session, event: Event) -> Event:
    """INSERT. Duplicate id → StorageError. Commit is the caller's job."""
    db.add(event)
    flush_or_raise(db, "insert event")
    logger.info(
        "event %s inserted by profile %s (starts %s)",
        event.id,
        event.profile_id,
        format_datetime(event.start_date_time),
    )
    return event


def update_event(db: Session, event: Event) -> Event:
    """Overwrite every column of the row with this event's id. Unknown id → StorageError(404)."""
    if fetch_one(db.query(Event).filter(Event.id == event.id)) is None:
        raise StorageError("event not found", 404)
    merged = db.merge(event)
    flush_or_raise(db, "update event")
    logger.info("event %s updated", event.id)
    return merged


def delete_event(db: Session, event: Event) -> None:
    """DELETE keyed by id. Attendance rows still pointing at the event make this fail."""
    deleted = delete_by_id(db, Event, event.id, "delete event")
    logger.info("event %s deleted (%d row)", event.id, deleted)


def get_event_by_id(db: Session, event_id: Any) -> Optional[Event]:
    event_id = validate_uuid(event_id, "event id")
    return fetch_one(db.query(Event).filter(Event.id == event_id))


def lock_event_by_id(db: Session, event_id: Any) -> Optional[Event]:
    """
    get_event_by_id with the row locked (SELECT ... FOR UPDATE) until commit/rollback.
    Attendance writes hold this lock while counting heads so concurrent joins cannot overbook.
    """
    event_id = validate_uuid(event_id, "event id")
    return fetch_one(db.query(Event).filter(Event.id == event_id).with_for_update())


def get_events_by_profile_id(db: Session, profile_id: Any) -> List[Event]:
    profile_id = validate_uuid(profile_id, "event profile id")
    return fetch_all(db.query(Event).filter(Event.profile_id == profile_id))


def get_events_by_start_date_time(db: Session, sunrise: Any, sunset: Any) -> List[Event]:
    """
    Events whose start falls in [sunrise, sunset] (both inclusive).
    Both bounds are required; None or blank → ArgumentError.
    """
    if sunrise in (None, "") or sunset in (None, ""):
        raise ArgumentError("dates are empty or insecure")
    start_from: datetime = validate_datetime(sunrise, "sunrise date")
    start_to: datetime = validate_datetime(sunset, "sunset date")
    return fetch_all(
        db.query(Event).filter(
            Event.start_date_time >= start_from,
            Event.start_date_time <= start_to,
        )
    )


def get_events_by_name(db: Session, name: str) -> List[Event]:
    """Case-insensitive substring match; % and _ in the input are matched literally."""
    name = sanitize_text(name or "")
    if not name:
        raise ArgumentError("not a valid event name")
    return fetch_all(db.query(Event).filter(Event.name.icontains(name, autoescape=True)))


def get_events_in_bbox(
    db: Session,
    min_lat: Any,
    min_lng: Any,
    max_lat: Any,
    max_lng: Any,
) -> List[Event]:
    """
    Events inside the (min_lat, min_lng, max_lat, max_lng) rectangle, edges included.
    Swapped min/max are corrected with sorted().
    """
    lat_lo, lat_hi = sorted(
        [validate_float(min_lat, "min latitude", -90, 90), validate_float(max_lat, "max latitude", -90, 90)]
    )
    lng_lo, lng_hi = sorted(
        [
            validate_float(min_lng, "min longitude", -180, 180),
            validate_float(max_lng, "max longitude", -180, 180),
        ]
    )
    q = db.query(Event).filter(
        Event.lat >= lat_lo,
        Event.lat <= lat_hi,
        Event.lng >= lng_lo,
        Event.lng <= lng_hi,
    )
    return fetch_all(q)


def get_all_events(db: Session) -> List[Event]:
    return fetch_all(db.query(Event))
