from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import Package, VersionInfo


class BackendError(Exception):
    """Base class for failures surfaced to the protocol layer."""


class NotFoundError(BackendError):
    """No matching provider, version or package."""


class StorageError(BackendError):
    """The backing store failed: network, configuration or an unparseable response."""


class Backend(ABC):
    """
    Source of provider metadata for the registry endpoints.

    `namespace` / `provider_type` are part of the protocol; a backend bound to a
    single upstream project is free to ignore them.
    """

    @abstractmethod
    async def list_provider_versions(self, namespace: str, provider_type: str) -> List[VersionInfo]:
        ...

    @abstractmethod
    async def find_provider_package(
        self,
        namespace: str,
        provider_type: str,
        version: str,
        os: str,
        arch: str,
    ) -> Package:
        ...

    async def aclose(self) -> None:
        """Release any resources held by the backend."""
        return None
