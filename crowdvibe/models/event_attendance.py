# EventAttendance model: join row between an event and a profile

import uuid

from sqlalchemy import Boolean, Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import validates

from crowdvibe.models.base import Base, BinaryUuid
from crowdvibe.validation import validate_bool, validate_int, validate_uuid

NUMBER_ATTENDING_MAX = 500


class EventAttendance(Base):
    """
    Attendance table, one row per (event, profile).
    check_in=True means the profile confirmed being there.
    """

    __tablename__ = "event_attendance"

    _rules = {
        "id": lambda v: validate_uuid(v, "event attendance id"),
        "event_id": lambda v: validate_uuid(v, "event attendance event id"),
        "profile_id": lambda v: validate_uuid(v, "event attendance profile id"),
        "check_in": lambda v: validate_bool(v, "event attendance check in"),
        "number_attending": lambda v: validate_int(
            v, "event attendance number attending", 0, NUMBER_ATTENDING_MAX
        ),
    }

    id = Column(BinaryUuid(), primary_key=True)
    event_id = Column(BinaryUuid(), ForeignKey("event.id"), nullable=False, index=True)
    profile_id = Column(BinaryUuid(), ForeignKey("profile.id"), nullable=False, index=True)
    check_in = Column(Boolean, nullable=False, default=False)
    number_attending = Column(Integer, nullable=False, default=1)  # head count this row stands for

    __table_args__ = (
        UniqueConstraint("event_id", "profile_id", name="uq_event_attendance_event_profile"),
    )

    def __init__(self, *, event_id, profile_id, check_in, number_attending, id=None):
        super().__init__(
            id=id if id is not None else uuid.uuid4(),
            event_id=event_id,
            profile_id=profile_id,
            check_in=check_in,
            number_attending=number_attending,
        )

    @validates(*_rules)
    def _validate_field(self, key, value):
        return self._rules[key](value)

    def __repr__(self) -> str:
        return f"<EventAttendance {self.id} event={self.event_id} profile={self.profile_id}>"
