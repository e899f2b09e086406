# provider_registry/main.py
from __future__ import annotations

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import settings
from .logging_conf import setup_logging
from .middleware import add_cors, add_correlation_middleware, install_request_logging, add_error_handlers
from .routers import discovery_router, health_router, providers_router
from .services import Backend, build_backend

logger = logging.getLogger("registry.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Logging first
    setup_logging(settings.log_level)
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)

    owned: Optional[Backend] = None
    if getattr(app.state, "backend", None) is None:
        # Misconfiguration is fatal: the registry has nothing to serve without a backend
        owned = build_backend(settings)
        app.state.backend = owned

    yield

    # Shutdown
    if owned is not None:
        await owned.aclose()
        app.state.backend = None
    logger.info("Shutdown complete")


def create_app(backend: Optional[Backend] = None) -> FastAPI:
    """
    Build the registry application. An injected backend is used as-is and left
    open on shutdown; otherwise one is built from settings at startup.
    """
    app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
    app.state.backend = backend

    # Middlewares
    add_cors(app, settings.cors_origins)
    install_request_logging(app)
    add_correlation_middleware(app)
    add_error_handlers(app)

    # Routers
    app.include_router(discovery_router)
    app.include_router(health_router)
    app.include_router(providers_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    reload_flag = os.getenv("RELOAD", "0") in ("1", "true", "True")
    uvicorn.run(
        "provider_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload_flag,
        log_level=settings.log_level.lower(),
    )
