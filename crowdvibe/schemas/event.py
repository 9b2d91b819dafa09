# Event API request/response schemas (camelCase JSON like the web client)

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def to_epoch_ms(value: datetime) -> int:
    """Stored naive-UTC datetime → epoch milliseconds (what the web client binds to)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return round(value.timestamp() * 1000)


class EventIn(BaseModel):
    """
    Create/update body. Only types are coerced here; lengths, ranges and
    dates are enforced by the Event entity so every caller gets the same errors.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="eventName")
    detail: str = Field(..., alias="eventDetail")
    lat: float = Field(..., alias="eventLat")
    lng: float = Field(..., alias="eventLong")
    price: float = Field(default=0, alias="eventPrice")
    # parsed by the Event entity: bad format → 400 ARGUMENT, impossible day → 400 RANGE
    start_date_time: str = Field(..., alias="eventStartDateTime")
    end_date_time: str = Field(..., alias="eventEndDateTime")
    attendee_limit: Optional[int] = Field(default=None, alias="eventAttendeeLimit")
    image: Optional[str] = Field(default=None, alias="eventImage")


class EventOut(BaseModel):
    """Event as sent to the client. Dates are epoch milliseconds."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(serialization_alias="eventId")
    profile_id: uuid.UUID = Field(serialization_alias="eventProfileId")
    attendee_limit: Optional[int] = Field(default=None, serialization_alias="eventAttendeeLimit")
    detail: str = Field(serialization_alias="eventDetail")
    end_date_time: datetime = Field(serialization_alias="eventEndDateTime")
    image: Optional[str] = Field(default=None, serialization_alias="eventImage")
    lat: float = Field(serialization_alias="eventLat")
    lng: float = Field(serialization_alias="eventLong")
    name: str = Field(serialization_alias="eventName")
    price: float = Field(serialization_alias="eventPrice")
    start_date_time: datetime = Field(serialization_alias="eventStartDateTime")

    @field_serializer("start_date_time", "end_date_time")
    def _serialize_date(self, value: datetime) -> int:
        return to_epoch_ms(value)
