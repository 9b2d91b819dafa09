# Rating CRUD + lookups + "already rated" predicate

import logging
from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from crowdvibe.crud.common import delete_by_id, fetch_all, fetch_exists, fetch_one, flush_or_raise
from crowdvibe.errors import StorageError
from crowdvibe.models.rating import Rating
from crowdvibe.validation import validate_uuid

logger = logging.getLogger(__name__)


def insert_rating(db: Session, rating: Rating) -> Rating:
    db.add(rating)
    flush_or_raise(db, "insert rating")
    logger.info(
        "rating %s inserted (attendance=%s rater=%s ratee=%s score=%s)",
        rating.id,
        rating.event_attendance_id,
        rating.rater_profile_id,
        rating.ratee_profile_id,
        rating.score,
    )
    return rating


def update_rating(db: Session, rating: Rating) -> Rating:
    if fetch_one(db.query(Rating).filter(Rating.id == rating.id)) is None:
        raise StorageError("rating not found", 404)
    merged = db.merge(rating)
    flush_or_raise(db, "update rating")
    return merged


def delete_rating(db: Session, rating: Rating) -> None:
    deleted = delete_by_id(db, Rating, rating.id, "delete rating")
    logger.info("rating %s deleted (%d row)", rating.id, deleted)


def get_rating_by_id(db: Session, rating_id: Any) -> Optional[Rating]:
    rating_id = validate_uuid(rating_id, "rating id")
    return fetch_one(db.query(Rating).filter(Rating.id == rating_id))


def get_ratings_by_event_attendance_id(db: Session, attendance_id: Any) -> List[Rating]:
    attendance_id = validate_uuid(attendance_id, "rating event attendance id")
    return fetch_all(db.query(Rating).filter(Rating.event_attendance_id == attendance_id))


def get_ratings_by_rater_profile_id(db: Session, profile_id: Any) -> List[Rating]:
    profile_id = validate_uuid(profile_id, "rating rater profile id")
    return fetch_all(db.query(Rating).filter(Rating.rater_profile_id == profile_id))


def get_ratings_by_ratee_profile_id(db: Session, profile_id: Any) -> List[Rating]:
    profile_id = validate_uuid(profile_id, "rating ratee profile id")
    return fetch_all(db.query(Rating).filter(Rating.ratee_profile_id == profile_id))


def has_rated(db: Session, attendance_id: Any, rater_profile_id: Any) -> bool:
    """Has this profile already rated on this attendance record?"""
    attendance_id = validate_uuid(attendance_id, "rating event attendance id")
    rater_profile_id = validate_uuid(rater_profile_id, "rating rater profile id")
    return fetch_exists(
        db.query(func.count(Rating.id)).filter(
            Rating.event_attendance_id == attendance_id,
            Rating.rater_profile_id == rater_profile_id,
        )
    )
