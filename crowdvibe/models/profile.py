# Profile model: user account referenced by events, attendance and ratings

import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import validates

from crowdvibe.models.base import Base, BinaryUuid
from crowdvibe.validation import validate_email, validate_text, validate_uuid


class Profile(Base):
    """Profile table. Credentials live with the external auth layer, not here."""

    __tablename__ = "profile"

    _rules = {
        "id": lambda v: validate_uuid(v, "profile id"),
        "user_name": lambda v: validate_text(v, "profile user name", 32),
        "email": lambda v: validate_email(v, "profile email", 128),
        "first_name": lambda v: validate_text(v, "profile first name", 32, required=False),
        "last_name": lambda v: validate_text(v, "profile last name", 32, required=False),
        "bio": lambda v: validate_text(v, "profile bio", 255, required=False),
        "image": lambda v: validate_text(v, "profile image", 255, required=False),
    }

    id = Column(BinaryUuid(), primary_key=True)
    user_name = Column(String(32), nullable=False, unique=True)  # handle, e.g. @sohigh
    email = Column(String(128), nullable=False, unique=True)
    first_name = Column(String(32), nullable=True)
    last_name = Column(String(32), nullable=True)
    bio = Column(String(255), nullable=True)
    image = Column(String(255), nullable=True)  # hosted image URL

    def __init__(
        self,
        *,
        user_name,
        email,
        first_name=None,
        last_name=None,
        bio=None,
        image=None,
        id=None,
    ):
        super().__init__(
            id=id if id is not None else uuid.uuid4(),
            user_name=user_name,
            email=email,
            first_name=first_name,
            last_name=last_name,
            bio=bio,
            image=image,
        )

    @validates(*_rules)
    def _validate_field(self, key, value):
        return self._rules[key](value)

    def __repr__(self) -> str:
        return f"<Profile {self.id} {self.user_name}>"
