from __future__ import annotations

import logging

from fastapi import APIRouter

from ..models import ServiceDiscovery

logger = logging.getLogger("registry.routers.discovery")

router = APIRouter(tags=["discovery"])


@router.get("/.well-known/terraform.json", response_model=ServiceDiscovery)
async def service_discovery():
    logger.info("Service discovery requested")
    return ServiceDiscovery(providers_v1="/v1/providers/")
