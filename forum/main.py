# forum/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from forum import __version__
from forum.api.v1 import build_api_router
from forum.core.config import Settings, configure_logging, get_settings
from forum.core.errors import ForumError
import forum.models  # noqa: F401  registers every table on Base.metadata
from forum.database import Base, SessionLocal, engine
from forum.services.seed_service import SeedService

logger = logging.getLogger(__name__)


def init_database(settings: Settings, session_factory=SessionLocal, bind=engine) -> None:
    """Create missing tables and load seed data when enabled"""
    Base.metadata.create_all(bind=bind)
    if not settings.seed_on_startup:
        return

    db = session_factory()
    try:
        seed_service = SeedService(db)
        seed_service.seed_from_directory(settings.seed_dir)
        seed_service.log_catalog()
    except ForumError as e:
        # a broken seed leaves the server usable with whatever got stored
        logger.error("Seeding failed: %s", e.detail)
    finally:
        db.close()


async def forum_error_handler(request: Request, exc: ForumError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.__class__.__name__, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def create_app(settings: Optional[Settings] = None, init_db: bool = True) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if init_db:
            init_database(settings)
        logger.info("%s started", settings.app_name)
        yield
        logger.info("%s stopped", settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        description="Movie forum: accounts, sessions, comments and genre catalogue",
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.add_exception_handler(ForumError, forum_error_handler)
    app.include_router(build_api_router(), prefix="/api/v1")

    @app.get("/")
    def read_root():
        """Service root"""
        return {
            "service": settings.app_name,
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()

# uvicorn forum.main:app --reload
