# Rating API: rate someone you attended an event with

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from crowdvibe.context import RequestContext, get_request_context
from crowdvibe.crud.event_attendance_crud import is_attending, should_rate
from crowdvibe.crud.rating_crud import (
    delete_rating,
    get_rating_by_id,
    get_ratings_by_event_attendance_id,
    get_ratings_by_ratee_profile_id,
    get_ratings_by_rater_profile_id,
    has_rated,
    insert_rating,
)
from crowdvibe.database import get_db
from crowdvibe.errors import ArgumentError, CrowdVibeError
from crowdvibe.models.rating import Rating
from crowdvibe.routers.event_attendances import require_attendance
from crowdvibe.schemas.common import Reply, reply
from crowdvibe.schemas.rating import RatingIn, RatingOut

router = APIRouter(prefix="/ratings", tags=["Ratings"])


def rating_to_data(rating: Rating) -> dict:
    return RatingOut.model_validate(rating).model_dump(mode="json", by_alias=True)


@router.post("", response_model=Reply)
def create_rating(
    body: RatingIn,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """
    Submit a rating as the calling profile.

    - 403: not signed in, attendance record is someone else's, or not checked in
    - 404: attendance record does not exist
    - 400: rating yourself, or the ratee did not attend that event
    - 409: already rated on this attendance record
    """
    rater_id = ctx.require_profile("you must be logged in to make a rating")
    attendance = require_attendance(db, body.event_attendance_id)
    if attendance.profile_id != rater_id:
        raise ArgumentError("you can only rate through your own attendance record", 403)
    if body.ratee_profile_id == rater_id:
        raise ArgumentError("you cannot rate yourself", 400)
    if not should_rate(db, attendance.event_id, rater_id):
        raise ArgumentError("you must check in at this event before rating", 403)
    if not is_attending(db, attendance.event_id, body.ratee_profile_id):
        raise ArgumentError("the rated profile did not attend this event", 400)
    if has_rated(db, attendance.id, rater_id):
        raise ArgumentError("you have already rated this event", 409)
    try:
        rating = Rating(rater_profile_id=rater_id, **body.model_dump())
        insert_rating(db, rating)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(rating_to_data(rating), "Rating was submitted successfully.")


@router.get("", response_model=Reply)
def list_ratings(
    event_attendance_id: Optional[str] = Query(None, alias="eventAttendanceId"),
    rater_profile_id: Optional[str] = Query(None, alias="raterProfileId"),
    ratee_profile_id: Optional[str] = Query(None, alias="rateeProfileId"),
    db: Session = Depends(get_db),
) -> Reply:
    if event_attendance_id is not None:
        ratings = get_ratings_by_event_attendance_id(db, event_attendance_id)
    elif rater_profile_id is not None:
        ratings = get_ratings_by_rater_profile_id(db, rater_profile_id)
    elif ratee_profile_id is not None:
        ratings = get_ratings_by_ratee_profile_id(db, ratee_profile_id)
    else:
        raise ArgumentError("eventAttendanceId, raterProfileId or rateeProfileId is required")
    return reply([rating_to_data(r) for r in ratings])


@router.get("/{rating_id}", response_model=Reply)
def get_rating(rating_id: str, db: Session = Depends(get_db)) -> Reply:
    rating = get_rating_by_id(db, rating_id)
    return reply(rating_to_data(rating) if rating is not None else None)


@router.delete("/{rating_id}", response_model=Reply)
def remove_rating(
    rating_id: str,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """Only the rater may withdraw a rating."""
    rating = get_rating_by_id(db, rating_id)
    if rating is None:
        raise ArgumentError("rating does not exist", 404)
    if rating.rater_profile_id != ctx.require_profile():
        raise ArgumentError("you are not allowed to delete this rating", 403)
    try:
        delete_rating(db, rating)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(message="Rating deleted")
