"""
Main entrypoint for the Contact Directory API.

This module assembles the FastAPI application, sets up logging,
registers the error translation for service exceptions and includes
the API router.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as
``app``, e.g.::

    uvicorn contact_directory_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.deps import build_repository
from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import (
    BadResourceException,
    ContactDirectoryError,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    BadResourceException: status.HTTP_400_BAD_REQUEST,
    ResourceNotFoundException: status.HTTP_404_NOT_FOUND,
    ResourceAlreadyExistsException: status.HTTP_409_CONFLICT,
}


async def contact_directory_error_handler(request: Request, exc: ContactDirectoryError) -> JSONResponse:
    """Translate a service exception to its HTTP status.

    The message is logged here, at the transport boundary; the
    service itself never retries.
    """
    logger.error(str(exc))
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    content = {"detail": str(exc)}
    if isinstance(exc, BadResourceException) and exc.violations:
        content["violations"] = [
            {"field": violation.field, "message": violation.message} for violation in exc.violations
        ]
    return JSONResponse(status_code=status_code, content=content)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first, then the contact store is built
    from the current settings and the routes are mounted under
    ``/api``.  Database migrations run on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.contact_repository = build_repository()

    app.add_exception_handler(ContactDirectoryError, contact_directory_error_handler)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        version = init_db()
        logger.info("Database ready at schema version %s", version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
