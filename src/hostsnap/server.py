"""
HTTP server for Hostsnap.

Exposes the current host snapshot as JSON on a single read-only route.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hostsnap import __version__
from hostsnap.exceptions import TelemetrySourceError
from hostsnap.normalizer import Normalizer

if TYPE_CHECKING:
    from hostsnap.config import Config
    from hostsnap.sources.base import TelemetrySource

logger = logging.getLogger(__name__)

# Configured level names (lower-cased) mapped to the names uvicorn accepts
UVICORN_LOG_LEVELS = {
    "critical": "critical",
    "fatal": "critical",
    "error": "error",
    "warning": "warning",
    "warn": "warning",
    "info": "info",
    "debug": "debug",
    "trace": "trace",
}


def uvicorn_log_level(level: str) -> str:
    """Translate a configured log level to a uvicorn level name, defaulting to info."""
    name = UVICORN_LOG_LEVELS.get(level.strip().lower())
    if name is None:
        logger.warning(f"Unknown log level {level!r} for the HTTP server, using info")
        return "info"
    return name


def create_app(source: TelemetrySource | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        source: Optional telemetry source. Reads the live host if not provided.
    """
    normalizer = Normalizer(source)

    app = FastAPI(
        title="Hostsnap",
        description="Point-in-time host telemetry snapshots.",
        version=__version__,
    )

    @app.exception_handler(TelemetrySourceError)
    async def telemetry_unavailable(request: Request, exc: TelemetrySourceError) -> JSONResponse:
        logger.error(f"Snapshot failed: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # Plain def: the blocking reads run in the threadpool
    @app.get("/get_info", summary="Return a snapshot of the host", tags=["system"])
    def get_info() -> dict[str, Any]:
        return normalizer.collect_snapshot().to_dict()

    return app


def serve(config: Config, source: TelemetrySource | None = None) -> None:
    """Run the HTTP server until interrupted."""
    app = create_app(source)

    logger.info(f"Server running on http://{config.host}:{config.port}")

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=uvicorn_log_level(config.log_level),
    )
