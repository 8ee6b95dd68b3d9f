"""
FastAPI Application Factory & Configuration.

This module initializes the FastAPI application instance. It is responsible for:
1.  **Middleware Setup**: CORS so pages embedding the widget can fetch data.
2.  **Exception Handling**: Library errors become structured 400 responses.
3.  **Routing**: Mounting the timeline router and the health probe.

Design Pattern
--------------
We use an **Application Factory** pattern (`create_app`) so each test can spin
up its own app instance.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chronoline import __version__
from chronoline.api.routers import timeline
from chronoline.api.schemas import HealthResponse
from chronoline.core.errors import TimelineError
from chronoline.core.settings import get_logger, load_settings

logger = get_logger("chronoline.api")


def create_app() -> FastAPI:
    """
    Construct and configure the chronoline FastAPI application.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    app = FastAPI(
        title="chronoline API",
        description="Timeline widget data from dated records",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(TimelineError)
    async def timeline_error_handler(request: Request, exc: TimelineError) -> JSONResponse:
        """Map configuration, record and date errors to HTTP 400."""
        logger.warning("Rejected %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=400,
            content={
                "error": type(exc).__name__,
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(timeline.router)

    @app.get("/health", tags=["System"], response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Simple liveness probe."""
        return HealthResponse(environment=load_settings().environment, version=__version__)

    return app


__all__ = ["create_app"]
