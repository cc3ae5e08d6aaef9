"""FastAPI app entry: config, logging, health, and error handling."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from embedvideo.config.logging import configure_logging, get_logger
from embedvideo.config.settings import get_settings
from embedvideo.controllers.routes.render import router as render_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging. Shutdown: nothing to release."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="EmbedVideo",
    description="Render video embed directives as HTML fragments",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(render_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: never leak internals to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
