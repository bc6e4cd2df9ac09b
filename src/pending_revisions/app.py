"""Web entry point — FastAPI app exposing the editing decision services."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from pending_revisions.config import Settings, load_settings
from pending_revisions.errors import NotFoundError
from pending_revisions.health import check_emulators
from pending_revisions.logging import configure_logging
from pending_revisions.routes import content
from pending_revisions.startup import init_database, init_services

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    if settings.app.is_development and not await check_emulators(settings):
        msg = "Local emulator unavailable"
        raise RuntimeError(msg)

    cosmos = await init_database(settings)
    app.state.cosmos = cosmos
    app.state.services = init_services(settings, cosmos.database)
    logger.info("Web app started — env=%s", settings.app.env)
    try:
        yield
    finally:
        await cosmos.close()
        logger.info("Web app shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app; services are attached during lifespan startup."""
    settings = settings or load_settings()
    configure_logging(settings.app.log_level)

    app = FastAPI(title="pending-revisions", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(SessionMiddleware, secret_key=settings.app.session_secret)
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.include_router(content.router)
    return app


def main() -> None:
    """Run the web app with uvicorn."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
