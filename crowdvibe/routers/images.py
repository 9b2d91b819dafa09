# Image API: attach an already-hosted image URL to an event or to the caller's profile

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from crowdvibe.context import RequestContext, get_request_context
from crowdvibe.crud.event_crud import update_event
from crowdvibe.crud.profile_crud import get_profile_by_id, update_profile
from crowdvibe.database import get_db
from crowdvibe.errors import ArgumentError, CrowdVibeError
from crowdvibe.routers.events import require_event, require_owner
from crowdvibe.schemas.common import Reply, reply
from crowdvibe.schemas.image import ImageAttachBody

router = APIRouter(prefix="/images", tags=["Images"])


@router.post("", response_model=Reply)
def attach_image(
    body: ImageAttachBody,
    db: Session = Depends(get_db),
    ctx: RequestContext = Depends(get_request_context),
) -> Reply:
    """eventId → event image (owner only); no eventId → the caller's profile image."""
    profile_id = ctx.require_profile("you are not allowed to upload an image")
    try:
        if body.event_id is not None:
            event = require_event(db, body.event_id)
            require_owner(event, ctx)
            event.image = body.image_url
            update_event(db, event)
        else:
            profile = get_profile_by_id(db, profile_id)
            if profile is None:
                raise ArgumentError("profile does not exist", 404)
            profile.image = body.image_url
            update_profile(db, profile)
        db.commit()
    except CrowdVibeError:
        db.rollback()
        raise
    return reply(message="Image uploaded Ok")
