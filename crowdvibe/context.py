# Per-request context: who is calling (resolved by the upstream auth layer)

import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from crowdvibe.errors import ArgumentError
from crowdvibe.validation import validate_uuid


@dataclass(frozen=True)
class RequestContext:
    """Passed explicitly into handlers instead of reading a global session."""

    profile_id: Optional[uuid.UUID] = None

    def require_profile(self, message: str = "you must be logged in") -> uuid.UUID:
        if self.profile_id is None:
            raise ArgumentError(message, 403)
        return self.profile_id


def get_request_context(x_profile_id: Optional[str] = Header(default=None)) -> RequestContext:
    """
    X-Profile-Id header → RequestContext.

    The header is set by the gateway after it has authenticated the caller;
    this service does not verify credentials itself.
    """
    if not x_profile_id:
        return RequestContext()
    try:
        return RequestContext(profile_id=validate_uuid(x_profile_id, "profile id"))
    except ArgumentError as exc:
        raise ArgumentError(exc.message, 403) from exc
