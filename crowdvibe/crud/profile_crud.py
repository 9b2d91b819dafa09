# Profile CRUD + lookups (id, email, user name)

import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from crowdvibe.crud.common import delete_by_id, fetch_one, flush_or_raise
from crowdvibe.errors import StorageError
from crowdvibe.models.profile import Profile
from crowdvibe.validation import validate_email, validate_text, validate_uuid

logger = logging.getLogger(__name__)


def insert_profile(db: Session, profile: Profile) -> Profile:
    """INSERT. Duplicate id, email or user name → StorageError(409)."""
    db.add(profile)
    flush_or_raise(db, "insert profile")
    logger.info("profile %s inserted (%s)", profile.id, profile.user_name)
    return profile


def update_profile(db: Session, profile: Profile) -> Profile:
    if fetch_one(db.query(Profile).filter(Profile.id == profile.id)) is None:
        raise StorageError("profile not found", 404)
    merged = db.merge(profile)
    flush_or_raise(db, "update profile")
    logger.info("profile %s updated", profile.id)
    return merged


def delete_profile(db: Session, profile: Profile) -> None:
    deleted = delete_by_id(db, Profile, profile.id, "delete profile")
    logger.info("profile %s deleted (%d row)", profile.id, deleted)


def get_profile_by_id(db: Session, profile_id: Any) -> Optional[Profile]:
    profile_id = validate_uuid(profile_id, "profile id")
    return fetch_one(db.query(Profile).filter(Profile.id == profile_id))


def get_profile_by_email(db: Session, email: Any) -> Optional[Profile]:
    email = validate_email(email, "profile email")
    return fetch_one(db.query(Profile).filter(Profile.email == email))


def get_profile_by_user_name(db: Session, user_name: Any) -> Optional[Profile]:
    user_name = validate_text(user_name, "profile user name", 32)
    return fetch_one(db.query(Profile).filter(Profile.user_name == user_name))
