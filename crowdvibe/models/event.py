# Event model: a profile-created gathering others can attend

import uuid
from typing import Any, Optional

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import validates

from crowdvibe.errors import OutOfRangeError
from crowdvibe.models.base import Base, BinaryUuid
from crowdvibe.validation import (
    validate_datetime,
    validate_float,
    validate_int,
    validate_text,
    validate_uuid,
)

DETAIL_MAX = 500
NAME_MAX = 64
IMAGE_MAX = 255
ATTENDEE_LIMIT_MAX = 500
PRICE_MAX_DIGITS = 7


def validate_price(value: Any) -> float:
    """Non-negative number whose plain decimal form fits in 7 characters (99.99, 1234567)."""
    price = validate_float(value, "event price", 0, float("inf"))
    if len(f"{price:.14g}") > PRICE_MAX_DIGITS:
        raise OutOfRangeError("event price is too much", field="event price")
    return price


def validate_attendee_limit(value: Any) -> Optional[int]:
    """None or 0 → no limit; otherwise 1..500."""
    if value in (None, "", 0, "0"):
        return None
    return validate_int(value, "event attendee limit", 0, ATTENDEE_LIMIT_MAX)


class Event(Base):
    """
    Event table.

    start/end are validated independently; an end before the start is stored as given.
    """

    __tablename__ = "event"

    _rules = {
        "id": lambda v: validate_uuid(v, "event id"),
        "profile_id": lambda v: validate_uuid(v, "event profile id"),
        "attendee_limit": validate_attendee_limit,
        "detail": lambda v: validate_text(v, "event detail", DETAIL_MAX),
        "end_date_time": lambda v: validate_datetime(v, "event end date"),
        "image": lambda v: validate_text(v, "event image", IMAGE_MAX, required=False),
        "lat": lambda v: validate_float(v, "event latitude", -90, 90),
        "lng": lambda v: validate_float(v, "event longitude", -180, 180),
        "name": lambda v: validate_text(v, "event name", NAME_MAX),
        "price": validate_price,
        "start_date_time": lambda v: validate_datetime(v, "event start date"),
    }

    id = Column(BinaryUuid(), primary_key=True)
    profile_id = Column(BinaryUuid(), ForeignKey("profile.id"), nullable=False, index=True)  # owner
    attendee_limit = Column(Integer, nullable=True)  # None = no limit
    detail = Column(String(DETAIL_MAX), nullable=False)
    end_date_time = Column(DateTime, nullable=False)
    image = Column(String(IMAGE_MAX), nullable=True)  # hosted image URL
    lat = Column(Float, nullable=False)  # WGS84
    lng = Column(Float, nullable=False)
    name = Column(String(NAME_MAX), nullable=False, index=True)
    price = Column(Float, nullable=False, default=0)
    start_date_time = Column(DateTime, nullable=False, index=True)

    def __init__(
        self,
        *,
        profile_id,
        detail,
        lat,
        lng,
        name,
        price,
        start_date_time,
        end_date_time,
        attendee_limit=None,
        image=None,
        id=None,
    ):
        super().__init__(
            id=id if id is not None else uuid.uuid4(),
            profile_id=profile_id,
            attendee_limit=attendee_limit,
            detail=detail,
            end_date_time=end_date_time,
            image=image,
            lat=lat,
            lng=lng,
            name=name,
            price=price,
            start_date_time=start_date_time,
        )

    @validates(*_rules)
    def _validate_field(self, key, value):
        return self._rules[key](value)

    def __repr__(self) -> str:
        return f"<Event {self.id} {self.name!r}>"
