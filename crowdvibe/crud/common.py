# Shared crud helpers: flush with error translation, row hydration into lists

import logging
from typing import List, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from crowdvibe.errors import CrowdVibeError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def flush_or_raise(db: Session, action: str) -> None:
    """
    Flush pending writes. Any SQLAlchemy failure → StorageError (409 for constraint violations).

    ⚠️ Does not commit/rollback; after a StorageError the caller must rollback.
    """
    try:
        db.flush()
    except IntegrityError as exc:
        logger.warning("%s rejected by a constraint: %s", action, exc.orig)
        raise StorageError(f"could not {action}: constraint violated", 409) from exc
    except SQLAlchemyError as exc:
        logger.error("%s failed: %s", action, exc)
        raise StorageError(f"could not {action}") from exc


def delete_by_id(db: Session, model, entity_id, action: str) -> int:
    """Single-row DELETE keyed by id. Returns the number of rows removed (0 or 1)."""
    try:
        deleted = db.query(model).filter(model.id == entity_id).delete(synchronize_session="fetch")
    except IntegrityError as exc:
        logger.warning("%s rejected by a constraint: %s", action, exc.orig)
        raise StorageError(f"could not {action}: row is still referenced", 409) from exc
    except SQLAlchemyError as exc:
        logger.error("%s failed: %s", action, exc)
        raise StorageError(f"could not {action}") from exc
    return deleted


def fetch_all(query: Query) -> List[T]:
    """
    Run the query and hydrate every row. A row failing entity validation
    aborts the whole query (StorageError) instead of being skipped.
    """
    results: List[T] = []
    try:
        for entity in query:
            results.append(entity)
    except CrowdVibeError as exc:
        raise StorageError(exc.message) from exc
    except SQLAlchemyError as exc:
        logger.error("query failed: %s", exc)
        raise StorageError("query failed") from exc
    return results


def fetch_one(query: Query) -> Optional[T]:
    """First hydrated row or None. Same error policy as fetch_all."""
    try:
        return query.first()
    except CrowdVibeError as exc:
        raise StorageError(exc.message) from exc
    except SQLAlchemyError as exc:
        logger.error("query failed: %s", exc)
        raise StorageError("query failed") from exc


def fetch_exists(query: Query) -> bool:
    """COUNT(...) query → bool (> 0)."""
    try:
        count = query.scalar()
    except SQLAlchemyError as exc:
        logger.error("count query failed: %s", exc)
        raise StorageError("query failed") from exc
    return (count or 0) > 0
