# EventAttendance API: RSVP / check-in, lookups, should-rate predicate

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from crowdvibe.context import RequestContext, get_request_context
from crowdvibe.crud.event_attendance_crud import (
    count_attending,
    delete_event_attendance,
    get_event_attendance_by_id,
    get_event_attendances_by_event_id,
    get_event_attendances_by_profile_id,
    insert_event_attendance,
    is_attending,
    should_rate,
    update_event_attendance,
)
from crowdvibe.crud.event_crud import lock_event_by_id
from crowdvibe.database import get_db
from crowdvibe.errors import ArgumentError, CrowdVibeError
from crowdvibe.models.event import Event
from crowdvibe.models.event_attendance import EventAttendance
from crowdvibe.schemas.common import Reply, reply
from crowdvibe.schemas.event_attendance import EventAttendanceIn, EventAttendanceOut

router = APIRouter(prefix="/event-attendances", tags=["EventAttendance"])


def attendance_to_data(attendance: EventAttendance) -> dict:
    return EventAttendanceOut.model_validate(attendance).model_dump(mode="json", by_alias=True)


def require_attendance(db: Session, attendance_id: Any) -> EventAttendance:
    attendance = get_event_attendance_by_id(db, attendance_id)
    if attendance is None:
        raise ArgumentError("event attendance does not exist", 404)
    return attendance


def lock_event(db: Session, event_id: Any) -> Event:
    """Event row locked for the rest of the transaction (404 when missing)."""
    event = lock_event_by_id(db, event_id)
    if event is None:
        raise ArgumentError("event does not exist", 404)
    return event


def check_attendee_limit(db: Session, event: Event, adding: int, releasing: int = 0) -> None:
    """
    Reject when the event's attendee limit would be exceeded. No limit → always fine.

    ⚠️ The event must come from lock_event so the count cannot change before commit.
    """
    if event.attendee_limit is None:
        return
    if count_attending(db, event.id) - releasing + adding > event.attendee_limit:
        raise ArgumentError("event is full (attendee limit reached)", 400)


@router.post("", response_model=Reply)
def create_event_attendance(
    body: EventAttendanceIn,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """Attend an event as the calling profile."""
    profile_id = ctx.require_profile("you must be logged in to attend an event")
    try:
        event = lock_event(db, body.event_id)
        if is_attending(db, event.id, profile_id):
            raise ArgumentError("you are already attending this event", 409)
        attendance = EventAttendance(profile_id=profile_id, **body.model_dump())
        check_attendee_limit(db, event, attendance.number_attending)
        insert_event_attendance(db, attendance)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(attendance_to_data(attendance), "Attendance recorded")


@router.get("", response_model=Reply)
def list_event_attendances(
    event_id: Optional[str] = Query(None, alias="eventId"),
    profile_id: Optional[str] = Query(None, alias="profileId"),
    db: Session = Depends(get_db),
) -> Reply:
    if event_id is not None:
        attendances = get_event_attendances_by_event_id(db, event_id)
    elif profile_id is not None:
        attendances = get_event_attendances_by_profile_id(db, profile_id)
    else:
        raise ArgumentError("eventId or profileId is required")
    return reply([attendance_to_data(a) for a in attendances])


@router.get("/should-rate", response_model=Reply)
def get_should_rate(
    event_id: str = Query(..., alias="eventId"),
    profile_id: str = Query(..., alias="profileId"),
    db: Session = Depends(get_db),
) -> Reply:
    """data: true when the profile checked in at the event."""
    return reply(should_rate(db, event_id, profile_id))


@router.get("/{attendance_id}", response_model=Reply)
def get_event_attendance(attendance_id: str, db: Session = Depends(get_db)) -> Reply:
    attendance = get_event_attendance_by_id(db, attendance_id)
    return reply(attendance_to_data(attendance) if attendance is not None else None)


@router.put("/{attendance_id}", response_model=Reply)
def put_event_attendance(
    attendance_id: str,
    body: EventAttendanceIn,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """Own attendance only (check in, change head count)."""
    existing = require_attendance(db, attendance_id)
    if existing.profile_id != ctx.require_profile():
        raise ArgumentError("you are not allowed to modify this attendance", 403)
    try:
        event = lock_event(db, body.event_id)
        if event.id != existing.event_id and is_attending(db, event.id, existing.profile_id):
            raise ArgumentError("you are already attending this event", 409)
        replacement = EventAttendance(id=existing.id, profile_id=existing.profile_id, **body.model_dump())
        releasing = existing.number_attending if existing.event_id == event.id else 0
        check_attendee_limit(db, event, replacement.number_attending, releasing)
        attendance = update_event_attendance(db, replacement)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(attendance_to_data(attendance), "Attendance updated")


@router.delete("/{attendance_id}", response_model=Reply)
def remove_event_attendance(
    attendance_id: str,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    attendance = require_attendance(db, attendance_id)
    if attendance.profile_id != ctx.require_profile():
        raise ArgumentError("you are not allowed to delete this attendance", 403)
    try:
        delete_event_attendance(db, attendance)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(message="Attendance deleted")
