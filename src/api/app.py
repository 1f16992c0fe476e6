"""FastAPI application factory: routes, error mapping, database wiring."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from src.api.routes import router
from src.core.config import Settings, configure_logging
from src.core.exceptions import NotFoundError, OwnershipMismatchError
from src.db.database import build_engine, build_session_factory

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    session_factory: Optional[sessionmaker[Session]] = None,
) -> FastAPI:
    """Build the application. A session factory can be injected (tests), otherwise one is built from settings."""
    settings = settings or Settings.from_env()
    configure_logging(settings)

    if session_factory is None:
        session_factory = build_session_factory(build_engine(settings))

    app = FastAPI(title="Game Testing API")
    app.state.session_factory = session_factory
    app.include_router(router, prefix=settings.api_prefix)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("%s %s -> 404: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)}
        )

    @app.exception_handler(OwnershipMismatchError)
    async def handle_ownership_mismatch(
        request: Request, exc: OwnershipMismatchError
    ) -> JSONResponse:
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": str(exc)}
        )

    return app
