import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crowdvibe.config import settings
from crowdvibe.errors import CrowdVibeError
from crowdvibe.logging_config import setup_logging
from crowdvibe.routers.event_attendances import router as event_attendances_router
from crowdvibe.routers.events import router as events_router
from crowdvibe.routers.images import router as images_router
from crowdvibe.routers.profiles import router as profiles_router
from crowdvibe.routers.ratings import router as ratings_router
from crowdvibe.schemas.common import Reply

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)


def _run_alembic_upgrade() -> None:
    """Apply DB migrations on startup (profile, event, event_attendance, rating tables)."""
    from alembic import command
    from alembic.config import Config

    root = Path(__file__).resolve().parent.parent
    cfg = Config(str(root / "alembic.ini"))
    command.upgrade(cfg, "head")


app = FastAPI(
    title=settings.project_name,
    description="CrowdVibe backend API: events, attendance, images and attendee ratings",
    version=settings.api_version,
)


@app.on_event("startup")
def _startup_migrate() -> None:
    if not settings.run_migrations:
        return
    try:
        _run_alembic_upgrade()
    except Exception:
        # app still boots without a reachable DB (e.g. local run); requests will fail until it is up
        logger.exception("alembic upgrade failed at startup")


@app.exception_handler(CrowdVibeError)
async def crowdvibe_error_handler(request: Request, exc: CrowdVibeError) -> JSONResponse:
    """Every domain error becomes {status, message} with the same HTTP status."""
    logger.warning(
        "%s %s → %s %s: %s", request.method, request.url.path, exc.status_code, exc.kind.value, exc.message
    )
    body = Reply(status=exc.status_code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'invalid request')}" if location else "invalid request"
    logger.warning("%s %s → 422: %s", request.method, request.url.path, message)
    body = Reply(status=422, message=message)
    return JSONResponse(status_code=422, content=body.model_dump())


app.include_router(profiles_router)
app.include_router(events_router)
app.include_router(event_attendances_router)
app.include_router(ratings_router)
app.include_router(images_router)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: restrict to the web client's origin in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    return {"status": "ok"}


@app.get("/", tags=["Root"])
async def root() -> dict:
    return {
        "message": "Welcome to the CrowdVibe API.",
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("crowdvibe.main:app", host="0.0.0.0", port=8000, reload=True)
