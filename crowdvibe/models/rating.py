# Rating model: one attendee scoring another after a checked-in event

import uuid

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import validates

from crowdvibe.models.base import Base, BinaryUuid
from crowdvibe.validation import validate_int, validate_uuid

SCORE_MIN = 1
SCORE_MAX = 100


class Rating(Base):
    """
    Rating table. Whether the rater may rate at all (checked-in attendance)
    is decided by the attendance predicates, not here.
    """

    __tablename__ = "rating"

    _rules = {
        "id": lambda v: validate_uuid(v, "rating id"),
        "event_attendance_id": lambda v: validate_uuid(v, "rating event attendance id"),
        "ratee_profile_id": lambda v: validate_uuid(v, "rating ratee profile id"),
        "rater_profile_id": lambda v: validate_uuid(v, "rating rater profile id"),
        "score": lambda v: validate_int(v, "rating score", SCORE_MIN, SCORE_MAX),
    }

    id = Column(BinaryUuid(), primary_key=True)
    event_attendance_id = Column(
        BinaryUuid(), ForeignKey("event_attendance.id"), nullable=False, index=True
    )
    ratee_profile_id = Column(BinaryUuid(), ForeignKey("profile.id"), nullable=False, index=True)
    rater_profile_id = Column(BinaryUuid(), ForeignKey("profile.id"), nullable=False, index=True)
    score = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("event_attendance_id", "rater_profile_id", name="uq_rating_attendance_rater"),
    )

    def __init__(self, *, event_attendance_id, ratee_profile_id, rater_profile_id, score, id=None):
        super().__init__(
            id=id if id is not None else uuid.uuid4(),
            event_attendance_id=event_attendance_id,
            ratee_profile_id=ratee_profile_id,
            rater_profile_id=rater_profile_id,
            score=score,
        )

    @validates(*_rules)
    def _validate_field(self, key, value):
        return self._rules[key](value)

    def __repr__(self) -> str:
        return f"<Rating {self.id} score={self.score}>"
