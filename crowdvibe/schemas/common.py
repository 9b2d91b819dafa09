# Reply envelope shared by every endpoint

from typing import Any, Optional

from pydantic import BaseModel


class Reply(BaseModel):
    """{status, message, data}. status mirrors the HTTP status code."""

    status: int = 200
    message: Optional[str] = None
    data: Optional[Any] = None


def reply(data: Any = None, message: Optional[str] = None, status: int = 200) -> Reply:
    return Reply(status=status, message=message, data=data)
