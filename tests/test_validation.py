import uuid
from datetime import datetime, timedelta, timezone

import pytest

from crowdvibe.errors import ArgumentError, ErrorKind, OutOfRangeError
from crowdvibe.validation import (
    format_datetime,
    sanitize_text,
    validate_bool,
    validate_datetime,
    validate_email,
    validate_float,
    validate_int,
    validate_text,
    validate_uuid,
)


def test_validate_uuid_accepts_every_form():
    value = uuid.uuid4()
    assert validate_uuid(value) == value
    assert validate_uuid(str(value)) == value
    assert validate_uuid(value.hex) == value
    assert validate_uuid(value.bytes) == value


@pytest.mark.parametrize("bad", ["", "not-a-uuid", b"short", 42, None])
def test_validate_uuid_rejects_garbage(bad):
    with pytest.raises(ArgumentError) as exc:
        validate_uuid(bad, "event id")
    assert exc.value.field == "event id"
    assert exc.value.kind is ErrorKind.ARGUMENT


def test_validate_datetime_none_is_now():
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    value = validate_datetime(None)
    assert value.tzinfo is None
    assert before - timedelta(seconds=1) <= value <= before + timedelta(seconds=5)


def test_validate_datetime_parses_storage_format():
    assert validate_datetime("2017-11-10 18:30:00") == datetime(2017, 11, 10, 18, 30)
    assert validate_datetime("2017-11-10 18:30:00.250000") == datetime(2017, 11, 10, 18, 30, 0, 250000)
    assert validate_datetime("2017-11-10") == datetime(2017, 11, 10)


def test_validate_datetime_iso_is_converted_to_naive_utc():
    assert validate_datetime("2017-11-10T18:00:00Z") == datetime(2017, 11, 10, 18)
    assert validate_datetime("2017-11-10T11:00:00-07:00") == datetime(2017, 11, 10, 18)


def test_validate_datetime_impossible_day_is_out_of_range():
    with pytest.raises(OutOfRangeError):
        validate_datetime("2017-02-30 12:00:00")


@pytest.mark.parametrize("bad", ["tomorrow", "   ", 3.5])
def test_validate_datetime_rejects_unparseable(bad):
    with pytest.raises(ArgumentError):
        validate_datetime(bad)


def test_format_datetime_keeps_microseconds():
    assert format_datetime(datetime(2017, 11, 10, 18, 0, 0, 5)) == "2017-11-10 18:00:00.000005"


def test_sanitize_text_strips_tags_and_whitespace():
    assert sanitize_text("  <b>Taco</b> Tuesday\x07 ") == "Taco Tuesday"


def test_validate_text_rules():
    assert validate_text("  hi ", "bio", 10) == "hi"
    assert validate_text("", "bio", 10, required=False) is None
    with pytest.raises(ArgumentError):
        validate_text("<script></script>", "name", 10)
    with pytest.raises(OutOfRangeError):
        validate_text("x" * 11, "name", 10)


def test_validate_email():
    assert validate_email("sohigh@crowdvibe.test") == "sohigh@crowdvibe.test"
    with pytest.raises(ArgumentError):
        validate_email("not an email")


def test_validate_float_bounds_are_inclusive():
    assert validate_float("90", "lat", -90, 90) == 90.0
    assert validate_float(-90, "lat", -90, 90) == -90.0
    with pytest.raises(OutOfRangeError):
        validate_float(90.0001, "lat", -90, 90)
    with pytest.raises(ArgumentError):
        validate_float(True, "lat", -90, 90)


def test_validate_int():
    assert validate_int("7", "n", 0, 10) == 7
    assert validate_int(None, "n", 0, 10, nullable=True) is None
    with pytest.raises(ArgumentError):
        validate_int(2.5, "n", 0, 10)
    with pytest.raises(ArgumentError):
        validate_int(None, "n", 0, 10)
    with pytest.raises(OutOfRangeError):
        validate_int(11, "n", 0, 10)


def test_validate_bool():
    assert validate_bool(True, "check in") is True
    assert validate_bool(0, "check in") is False
    assert validate_bool("true", "check in") is True
    assert validate_bool("0", "check in") is False
    with pytest.raises(ArgumentError):
        validate_bool("maybe", "check in")
