import sqlite3
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from crowdvibe.config import settings

# engine (future=True: 2.0 style API)
engine: Engine = create_engine(settings.database_url, echo=settings.database_echo, future=True)


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """
    SQLite ships with REFERENCES checks off; turn them on per connection
    so event/attendance/rating foreign keys behave like on PostgreSQL.
    Other drivers are left alone.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


# session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped DB session for FastAPI dependency injection.

    @router.get("/events")
    def list_events(db: Session = Depends(get_db)):
        ...
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
