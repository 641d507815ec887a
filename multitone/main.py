from __future__ import annotations

import time
from functools import lru_cache

from fastapi import FastAPI, Request

from multitone.api import router as api_router
from multitone.container import (
    get_generator_service,
    get_preset_registry,
    get_wav_writer,
)
from multitone.logging_utils import get_logger


logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="multitone-generator", version="0.1.0")

    @app.middleware("http")
    async def log_http_requests(request: Request, call_next):
        """Centralized logging for all HTTP requests."""
        start = time.monotonic()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration = time.monotonic() - start
            client_host = request.client.host if request.client else "unknown"
            status_code = response.status_code if response is not None else 500
            logger.info(
                "HTTP %s %s from %s -> %d in %.3fs",
                request.method,
                request.url.path,
                client_host,
                status_code,
                duration,
            )

    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        # Force-init singletons so that failures surface at startup.
        registry = get_preset_registry()
        writer = get_wav_writer()
        generator = get_generator_service()
        logger.info(
            "Services initialized (presets=%d, writer=%s, generator=%s)",
            len(list(registry.list_presets())),
            type(writer).__name__,
            type(generator).__name__,
        )

    return app


@lru_cache(maxsize=1)
def get_app() -> FastAPI:
    return create_app()


app = get_app()
