from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response

from people_api import __version__
from people_api.core.config import Settings, get_settings
from people_api.core.observability import setup_logging
from people_api.repositories.json_storage import PeopleStore
from people_api.routers import people as people_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (`uvicorn people_api.app:create_app --factory`)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info("People API started", extra={"db_file": settings.db_file})
        yield
        logger.info("People API shutting down")

    app = FastAPI(title="People API", version=__version__, lifespan=lifespan)

    store = PeopleStore(settings.db_file)
    app.state.settings = settings
    app.state.people_store = store
    app.include_router(people_router.create_router(store, strict_status=settings.strict_status))

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s",
            request.url.path,
            exc,
            exc_info=True,
            extra={"path": request.url.path},
        )
        return Response(status_code=500)

    return app


app = create_app()
