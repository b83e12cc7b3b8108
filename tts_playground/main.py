"""FastAPI application entrypoint for the TTS playground."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.errors import TTSPlaygroundError
from .core.logging import configure_logging
from .core.settings import Settings, get_settings
from .routers import api_router
from .routers.tts import tts_error_handler
from .schemas.common import HealthResponse
from .services.gemini import build_gemini_client

logger = logging.getLogger(__name__)


def create_lifespan(settings: Settings):
    """Create a lifespan context manager that provisions the Gemini client."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "gemini_client", None) is None:
            app.state.gemini_client = build_gemini_client(settings)
            logger.info("Gemini client ready, default model %s", settings.default_model)
        yield

    return lifespan


async def _invalid_body_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request body: %s", exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


def create_app(settings: Settings | None = None, client: Any | None = None) -> FastAPI:
    """Application factory; ``client`` replaces the Gemini client, e.g. in tests."""

    app_settings = settings or get_settings()
    configure_logging(app_settings.log_level)

    app = FastAPI(
        title="TTS Playground",
        version="0.1.0",
        lifespan=create_lifespan(app_settings),
    )
    app.state.settings = app_settings
    app.state.gemini_client = client

    app.add_exception_handler(RequestValidationError, _invalid_body_handler)
    app.add_exception_handler(TTSPlaygroundError, tts_error_handler)

    @app.get("/healthz", tags=["health"], response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        return HealthResponse()

    app.include_router(api_router)

    return app


app = create_app()

__all__ = ["app", "create_app", "run"]


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tts_playground.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()