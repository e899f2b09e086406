# provider_registry/middleware/error_handlers.py
from __future__ import annotations
import logging
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..services.backend import NotFoundError, StorageError

logger = logging.getLogger("registry.errors")


def add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(_, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "status_code": exc.status_code},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(_, exc: NotFoundError):
        logger.debug("Not found: %s", exc)
        return JSONResponse(status_code=404, content={"detail": str(exc) or "Not Found", "status_code": 404})

    @app.exception_handler(StorageError)
    async def storage_error_handler(_, exc: StorageError):
        logger.warning("Backend storage error: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Storage Error", "status_code": 500})

    @app.exception_handler(Exception)
    async def generic_exception_handler(_, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
