# EventAttendance API schemas

import uuid

from pydantic import BaseModel, ConfigDict, Field


class EventAttendanceIn(BaseModel):
    """Create/update body. The profile comes from the request context, not the body."""

    model_config = ConfigDict(populate_by_name=True)

    event_id: uuid.UUID = Field(..., alias="eventAttendanceEventId")
    check_in: bool = Field(default=False, alias="eventAttendanceCheckIn")
    number_attending: int = Field(default=1, alias="eventAttendanceNumberAttending")


class EventAttendanceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(serialization_alias="eventAttendanceId")
    event_id: uuid.UUID = Field(serialization_alias="eventAttendanceEventId")
    profile_id: uuid.UUID = Field(serialization_alias="eventAttendanceProfileId")
    check_in: bool = Field(serialization_alias="eventAttendanceCheckIn")
    number_attending: int = Field(serialization_alias="eventAttendanceNumberAttending")
