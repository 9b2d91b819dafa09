# Profile API schemas

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="profileUserName")
    email: str = Field(..., alias="profileEmail")
    first_name: Optional[str] = Field(default=None, alias="profileFirstName")
    last_name: Optional[str] = Field(default=None, alias="profileLastName")
    bio: Optional[str] = Field(default=None, alias="profileBio")
    image: Optional[str] = Field(default=None, alias="profileImage")


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(serialization_alias="profileId")
    user_name: str = Field(serialization_alias="profileUserName")
    email: str = Field(serialization_alias="profileEmail")
    first_name: Optional[str] = Field(default=None, serialization_alias="profileFirstName")
    last_name: Optional[str] = Field(default=None, serialization_alias="profileLastName")
    bio: Optional[str] = Field(default=None, serialization_alias="profileBio")
    image: Optional[str] = Field(default=None, serialization_alias="profileImage")
