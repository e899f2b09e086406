# provider_registry/middleware/__init__.py
from .cors import add_cors
from .correlation import add_correlation_middleware, CorrelationIdFilter
from .logging import install_request_logging
from .error_handlers import add_error_handlers

__all__ = [
    "add_cors",
    "add_correlation_middleware",
    "CorrelationIdFilter",
    "install_request_logging",
    "add_error_handlers",
]
