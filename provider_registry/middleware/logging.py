# provider_registry/middleware/logging.py
from __future__ import annotations
import time
import logging
from fastapi import FastAPI, Request

from .correlation import get_correlation_id

logger = logging.getLogger("registry.access")


def _backend_name(request: Request) -> str:
    backend = getattr(request.app.state, "backend", None)
    return type(backend).__name__ if backend is not None else "-"


def install_request_logging(app: FastAPI) -> None:
    """
    One access line per request, tagged with the serving backend and the
    correlation id. Backend failures (5xx) are logged at WARNING.
    """

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        start = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s failed backend=%s corr=%s (%.2f ms)",
                route, _backend_name(request), get_correlation_id(request),
                (time.perf_counter() - start) * 1000.0,
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s -> %s backend=%s corr=%s (%.2f ms)",
            route, response.status_code, _backend_name(request), get_correlation_id(request),
            (time.perf_counter() - start) * 1000.0,
        )
        return response
