from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..models import Package, VersionsResponse
from ..services.backend import Backend
from .dependencies import get_backend

logger = logging.getLogger("registry.routers.providers")

router = APIRouter(prefix="/v1/providers", tags=["providers"])


# NotFoundError / StorageError raised by the backend are mapped to 404 / 500
# by the handlers in middleware.error_handlers.
@router.get("/{namespace}/{type}/versions", response_model=VersionsResponse)
async def list_versions(namespace: str, type: str, backend: Backend = Depends(get_backend)):
    logger.info("Versions requested for %s/%s", namespace, type)
    versions = await backend.list_provider_versions(namespace, type)
    return VersionsResponse(versions=versions)


@router.get("/{namespace}/{type}/{version}/download/{os}/{arch}", response_model=Package)
async def find_provider_package(
    namespace: str,
    type: str,
    version: str,
    os: str,
    arch: str,
    backend: Backend = Depends(get_backend),
):
    logger.info("Download requested for %s/%s version %s on %s/%s", namespace, type, version, os, arch)
    return await backend.find_provider_package(namespace, type, version, os, arch)
