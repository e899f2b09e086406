from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import FastAPI, Request, Response


HEADER_NAME = "X-Correlation-ID"
STATE_ATTR = "correlation_id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


def get_correlation_id(request: Request) -> str:
    """
    Accessor for handlers to read the correlation id.
    """
    return getattr(request.state, STATE_ATTR, "")


class CorrelationIdFilter(logging.Filter):
    """Stamps `correlation_id` on every record so formatters can print it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = _correlation_id.get()
        return True


def add_correlation_middleware(app: FastAPI) -> None:
    """
    Registers a lightweight middleware that ensures every request/response
    carries an X-Correlation-ID. If absent, a new one is generated.
    """

    @app.middleware("http")
    async def correlation_middleware(request: Request, call_next: Callable):
        corr = request.headers.get(HEADER_NAME) or uuid.uuid4().hex
        setattr(request.state, STATE_ATTR, corr)
        token = _correlation_id.set(corr)
        try:
            response: Response = await call_next(request)
        finally:
            _correlation_id.reset(token)
        if HEADER_NAME not in response.headers:
            response.headers[HEADER_NAME] = corr
        return response
