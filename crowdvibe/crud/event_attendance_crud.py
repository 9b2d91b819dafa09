# EventAttendance CRUD + lookups + "should rate" predicate

import logging
from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from crowdvibe.crud.common import delete_by_id, fetch_all, fetch_exists, fetch_one, flush_or_raise
from crowdvibe.errors import StorageError
from crowdvibe.models.event_attendance import EventAttendance
from crowdvibe.validation import validate_uuid

logger = logging.getLogger(__name__)


def insert_event_attendance(db: Session, attendance: EventAttendance) -> EventAttendance:
    db.add(attendance)
    flush_or_raise(db, "insert event attendance")
    logger.info(
        "attendance %s inserted (event=%s profile=%s)",
        attendance.id,
        attendance.event_id,
        attendance.profile_id,
    )
    return attendance


def update_event_attendance(db: Session, attendance: EventAttendance) -> EventAttendance:
    """Full overwrite keyed by id. Unknown id → StorageError(404)."""
    query = db.query(EventAttendance).filter(EventAttendance.id == attendance.id)
    if fetch_one(query) is None:
        raise StorageError("event attendance not found", 404)
    merged = db.merge(attendance)
    flush_or_raise(db, "update event attendance")
    logger.info("attendance %s updated (check_in=%s)", attendance.id, attendance.check_in)
    return merged


def delete_event_attendance(db: Session, attendance: EventAttendance) -> None:
    deleted = delete_by_id(db, EventAttendance, attendance.id, "delete event attendance")
    logger.info("attendance %s deleted (%d row)", attendance.id, deleted)


def get_event_attendance_by_id(db: Session, attendance_id: Any) -> Optional[EventAttendance]:
    attendance_id = validate_uuid(attendance_id, "event attendance id")
    return fetch_one(db.query(EventAttendance).filter(EventAttendance.id == attendance_id))


def get_event_attendances_by_event_id(db: Session, event_id: Any) -> List[EventAttendance]:
    event_id = validate_uuid(event_id, "event attendance event id")
    return fetch_all(db.query(EventAttendance).filter(EventAttendance.event_id == event_id))


def get_event_attendances_by_profile_id(db: Session, profile_id: Any) -> List[EventAttendance]:
    profile_id = validate_uuid(profile_id, "event attendance profile id")
    return fetch_all(db.query(EventAttendance).filter(EventAttendance.profile_id == profile_id))


def get_checked_in_attendance_by_profile_id(db: Session, profile_id: Any) -> Optional[EventAttendance]:
    """First checked-in attendance of the profile (any event), or None."""
    profile_id = validate_uuid(profile_id, "profile id")
    return fetch_one(
        db.query(EventAttendance).filter(
            EventAttendance.check_in.is_(True),
            EventAttendance.profile_id == profile_id,
        )
    )


def should_rate(db: Session, event_id: Any, profile_id: Any) -> bool:
    """
    True only when a checked-in attendance row exists for (event, profile).
    Not attending, or attending without check-in → False.
    """
    event_id = validate_uuid(event_id, "event id")
    profile_id = validate_uuid(profile_id, "profile id")
    return fetch_exists(
        db.query(func.count(EventAttendance.id)).filter(
            EventAttendance.check_in.is_(True),
            EventAttendance.event_id == event_id,
            EventAttendance.profile_id == profile_id,
        )
    )


def is_attending(db: Session, event_id: Any, profile_id: Any) -> bool:
    """True when the profile has an attendance row for the event, checked in or not."""
    event_id = validate_uuid(event_id, "event id")
    profile_id = validate_uuid(profile_id, "profile id")
    return fetch_exists(
        db.query(func.count(EventAttendance.id)).filter(
            EventAttendance.event_id == event_id,
            EventAttendance.profile_id == profile_id,
        )
    )


def count_attending(db: Session, event_id: Any) -> int:
    """SUM(number_attending) over every attendance row of the event (0 when none)."""
    event_id = validate_uuid(event_id, "event id")
    try:
        total = (
            db.query(func.coalesce(func.sum(EventAttendance.number_attending), 0))
            .filter(EventAttendance.event_id == event_id)
            .scalar()
        )
    except SQLAlchemyError as exc:
        logger.error("attendance count failed: %s", exc)
        raise StorageError("query failed") from exc
    return int(total or 0)
