# Image attach request (the file itself is already hosted elsewhere)

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ImageAttachBody(BaseModel):
    """eventId set → event image (owner only); otherwise the current profile's image."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(..., alias="imageUrl")
    event_id: Optional[uuid.UUID] = Field(default=None, alias="eventId")
