from .discovery_router import router as discovery_router
from .health_router import router as health_router
from .providers_router import router as providers_router

__all__ = ["discovery_router", "health_router", "providers_router"]
