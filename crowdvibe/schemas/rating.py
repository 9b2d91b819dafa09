# Rating API schemas

import uuid

from pydantic import BaseModel, ConfigDict, Field


class RatingIn(BaseModel):
    """Rating submission. All three fields are mandatory; the rater is the signed-in profile."""

    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(..., alias="ratingScore")
    ratee_profile_id: uuid.UUID = Field(..., alias="ratingRateeProfileId")
    event_attendance_id: uuid.UUID = Field(..., alias="ratingEventAttendanceId")


class RatingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(serialization_alias="ratingId")
    event_attendance_id: uuid.UUID = Field(serialization_alias="ratingEventAttendanceId")
    ratee_profile_id: uuid.UUID = Field(serialization_alias="ratingRateeProfileId")
    rater_profile_id: uuid.UUID = Field(serialization_alias="ratingRaterProfileId")
    score: int = Field(serialization_alias="ratingScore")
