# Field validators shared by every entity (pure functions, no I/O)

import re
import uuid
from datetime import date, datetime, timezone
from typing import Any, Optional

from crowdvibe.errors import ArgumentError, OutOfRangeError

# Storage format for date/times: Y-m-d H:i:s.u (microsecond precision)
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_MYSQL_LIKE_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MYSQL_LIKE_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}(\.\d{1,6})?$")
_TAG = re.compile(r"<[^>]*(>|$)")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_uuid(value: Any, field: str = "id") -> uuid.UUID:
    """
    UUID, 16 raw bytes, or str(hyphenated / 32 hex) → uuid.UUID.
    Anything else raises ArgumentError.
    """
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 16:
            raise ArgumentError(f"{field} is not a valid uuid", field=field)
        return uuid.UUID(bytes=bytes(value))
    if isinstance(value, str):
        try:
            return uuid.UUID(value.strip())
        except ValueError:
            raise ArgumentError(f"{field} is not a valid uuid", field=field) from None
    raise ArgumentError(f"{field} is not a valid uuid", field=field)


def validate_datetime(value: Any, field: str = "date") -> datetime:
    """
    datetime/date/str/None → naive UTC datetime.

    - None: current time.
    - "Y-m-d" or "Y-m-d H:i:s[.u]": parsed strictly; a well-formed string naming a
      day that does not exist (2017-02-30) raises OutOfRangeError.
    - other strings: ISO-8601 (a trailing Z is accepted).
    """
    if value is None:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise ArgumentError(f"{field} is not a valid date", field=field)

    text = value.strip()
    if not text:
        raise ArgumentError(f"{field} is empty", field=field)

    if _MYSQL_LIKE_DATE.match(text) or _MYSQL_LIKE_DATETIME.match(text):
        fmt = "%Y-%m-%d"
        if " " in text:
            fmt = "%Y-%m-%d %H:%M:%S.%f" if "." in text else "%Y-%m-%d %H:%M:%S"
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            raise OutOfRangeError(f"{field} is not a valid date", field=field) from None

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ArgumentError(f"{field} is not a valid date", field=field) from None
    return _to_naive_utc(parsed)


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def sanitize_text(value: str) -> str:
    """Trim and strip markup tags / control characters."""
    value = _TAG.sub("", value)
    value = _CONTROL_CHARS.sub("", value)
    return value.strip()


def validate_text(
    value: Any,
    field: str,
    max_length: int,
    required: bool = True,
) -> Optional[str]:
    """
    Sanitized string, or None for an optional field left blank.
    Empty required field → ArgumentError, over max_length → OutOfRangeError.
    """
    if value is None:
        if required:
            raise ArgumentError(f"{field} is empty or insecure", field=field)
        return None
    if not isinstance(value, str):
        raise ArgumentError(f"{field} must be a string", field=field)

    cleaned = sanitize_text(value)
    if not cleaned:
        if required:
            raise ArgumentError(f"{field} is empty or insecure", field=field)
        return None
    if len(cleaned) > max_length:
        raise OutOfRangeError(f"{field} is too long", field=field)
    return cleaned


def validate_email(value: Any, field: str = "email", max_length: int = 128) -> str:
    email = validate_text(value, field, max_length)
    if not _EMAIL.match(email):
        raise ArgumentError(f"{field} is not a valid email", field=field)
    return email


def validate_float(value: Any, field: str, low: float, high: float) -> float:
    """Number or numeric string within [low, high]."""
    number = _parse_number(value, field, float)
    if number < low or number > high:
        raise OutOfRangeError(f"{field} is out of range", field=field)
    return number


def validate_int(
    value: Any,
    field: str,
    low: int,
    high: int,
    nullable: bool = False,
) -> Optional[int]:
    """Integer or integer string within [low, high]. None passes only when nullable."""
    if value is None:
        if nullable:
            return None
        raise ArgumentError(f"{field} is empty", field=field)
    number = _parse_number(value, field, int)
    if number < low or number > high:
        raise OutOfRangeError(f"{field} is out of range", field=field)
    return number


def _parse_number(value: Any, field: str, kind: type):
    if isinstance(value, bool) or value is None:
        raise ArgumentError(f"{field} is not a number", field=field)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ArgumentError(f"{field} is empty", field=field)
    try:
        if kind is int and isinstance(value, float):
            if not value.is_integer():
                raise ValueError(value)
            return int(value)
        return kind(value)
    except (TypeError, ValueError):
        raise ArgumentError(f"{field} is not a number", field=field) from None


def validate_bool(value: Any, field: str) -> bool:
    """bool, int (non-zero = True) or "true"/"false"/"1"/"0" → bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in {"true", "yes", "on"}:
            return True
        if text in {"false", "no", "off", ""}:
            return False
        try:
            return int(text) != 0
        except ValueError:
            pass
    raise ArgumentError(f"{field} is not a boolean", field=field)
