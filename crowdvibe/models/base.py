import uuid

from sqlalchemy import LargeBinary, event
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator

from crowdvibe.validation import validate_uuid


class Base(DeclarativeBase):
    """
    Base class for every CrowdVibe entity.

    Subclasses list their per-field rules in ``_rules`` (attribute name →
    pure validator) and route them through ``@validates``, so a field is either
    replaced by its canonical value or left untouched while an error is raised.
    Rows loaded from the database are run through the same rules (see
    ``_revalidate_loaded_row``).
    """

    _rules = {}

    def check_rules(self) -> None:
        """Re-run every field rule against the current values (no assignment)."""
        for key, rule in self._rules.items():
            rule(getattr(self, key))


@event.listens_for(Base, "load", propagate=True)
def _revalidate_loaded_row(target: Base, context) -> None:
    # a stored row that no longer passes validation aborts the whole query
    target.check_rules()


class BinaryUuid(TypeDecorator):
    """uuid.UUID ↔ 16-byte binary column."""

    impl = LargeBinary
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(length=16)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return validate_uuid(value).bytes

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return uuid.UUID(bytes=bytes(value))
