# Profile API: sign-up record, lookups, own-profile edits

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from crowdvibe.context import RequestContext, get_request_context
from crowdvibe.crud.profile_crud import (
    delete_profile,
    get_profile_by_email,
    get_profile_by_id,
    get_profile_by_user_name,
    insert_profile,
    update_profile,
)
from crowdvibe.database import get_db
from crowdvibe.errors import ArgumentError, CrowdVibeError
from crowdvibe.models.profile import Profile
from crowdvibe.schemas.common import Reply, reply
from crowdvibe.schemas.profile import ProfileIn, ProfileOut

router = APIRouter(prefix="/profiles", tags=["Profiles"])


def profile_to_data(profile: Optional[Profile]) -> Optional[dict]:
    if profile is None:
        return None
    return ProfileOut.model_validate(profile).model_dump(mode="json", by_alias=True)


def require_own_profile(db: Session, profile_id: str, ctx: RequestContext) -> Profile:
    profile = get_profile_by_id(db, profile_id)
    if profile is None:
        raise ArgumentError("profile does not exist", 404)
    if profile.id != ctx.require_profile():
        raise ArgumentError("you are not allowed to access this profile", 403)
    return profile


@router.post("", response_model=Reply)
def create_profile(body: ProfileIn, db: Session = Depends(get_db)) -> Reply:
    try:
        profile = Profile(**body.model_dump())
        insert_profile(db, profile)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(profile_to_data(profile), "Profile created OK")


@router.get("", response_model=Reply)
def find_profile(
    email: Optional[str] = Query(None),
    user_name: Optional[str] = Query(None, alias="userName"),
    db: Session = Depends(get_db),
) -> Reply:
    if email is not None:
        return reply(profile_to_data(get_profile_by_email(db, email)))
    if user_name is not None:
        return reply(profile_to_data(get_profile_by_user_name(db, user_name)))
    raise ArgumentError("email or userName is required")


@router.get("/{profile_id}", response_model=Reply)
def get_profile(profile_id: str, db: Session = Depends(get_db)) -> Reply:
    return reply(profile_to_data(get_profile_by_id(db, profile_id)))


@router.put("/{profile_id}", response_model=Reply)
def put_profile(
    profile_id: str,
    body: ProfileIn,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    existing = require_own_profile(db, profile_id, ctx)
    try:
        profile = update_profile(db, Profile(id=existing.id, **body.model_dump()))
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(profile_to_data(profile), "Profile updated OK")


@router.delete("/{profile_id}", response_model=Reply)
def remove_profile(
    profile_id: str,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    profile = require_own_profile(db, profile_id, ctx)
    try:
        delete_profile(db, profile)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(message="Profile deleted")
