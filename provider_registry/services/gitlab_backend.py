from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..clients.gitlab_releases import GitLabClientError, GitLabReleasesClient
from ..models import PROVIDER_PROTOCOLS, Package, RawRelease, SigningKeys, VersionInfo
from .backend import Backend, NotFoundError, StorageError
from .translation import (
    ReleaseTranslationError,
    VERSION_MARKER,
    find_archive_link,
    find_shasums_link,
    find_signature_link,
    link_download_url,
    shasum_from_manifest,
    version_from_release,
)

logger = logging.getLogger("registry.backends.gitlab")


class GitLabReleaseBackend(Backend):
    """
    Serves a single GitLab project's releases as the versions of whatever
    provider is requested; namespace and type are not used for routing.
    """

    def __init__(
        self,
        client: GitLabReleasesClient,
        project: Optional[str] = None,
        *,
        signing_keys: Optional[SigningKeys] = None,
    ) -> None:
        self.client = client
        self.project = project
        self.signing_keys = signing_keys or SigningKeys()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _fetch_releases(self) -> List[RawRelease]:
        if not self.project:
            logger.warning("gitlab backend has no project configured")
            raise StorageError("no GitLab project configured")
        try:
            return await self.client.list_releases(self.project)
        except GitLabClientError as e:
            if e.not_found:
                raise NotFoundError(f"project {self.project!r} not found") from e
            logger.warning("gitlab.releases failed project=%s: %s", self.project, e)
            raise StorageError(str(e)) from e

    async def _translated_releases(self) -> List[Tuple[RawRelease, VersionInfo]]:
        out: List[Tuple[RawRelease, VersionInfo]] = []
        for release in await self._fetch_releases():
            try:
                out.append((release, version_from_release(release)))
            except ReleaseTranslationError as e:
                logger.info("release.skipped tag=%s reason=%s", release.tag_name, e)
        return out

    async def list_provider_versions(self, namespace: str, provider_type: str) -> List[VersionInfo]:
        return [info for _, info in await self._translated_releases()]

    async def find_provider_package(
        self,
        namespace: str,
        provider_type: str,
        version: str,
        os: str,
        arch: str,
    ) -> Package:
        wanted = version[len(VERSION_MARKER):] if version.startswith(VERSION_MARKER) else version

        release = next(
            (rel for rel, info in await self._translated_releases() if info.version == wanted),
            None,
        )
        if release is None:
            raise NotFoundError(f"version {version!r} not found")

        archive = find_archive_link(release, os, arch)
        if archive is None:
            raise NotFoundError(f"no {os}/{arch} package for version {version!r}")

        # both are guaranteed by version_from_release
        shasums = find_shasums_link(release)
        signature = find_signature_link(release)
        shasums_url = link_download_url(shasums)

        try:
            manifest = await self.client.fetch_text(shasums_url)
        except GitLabClientError as e:
            logger.warning("gitlab.shasums failed url=%s: %s", shasums_url, e)
            raise StorageError(str(e)) from e

        shasum = shasum_from_manifest(manifest, archive.name)
        if shasum is None:
            logger.warning("shasum missing file=%s manifest=%s", archive.name, shasums.name)
            raise StorageError(f"{archive.name} is not listed in {shasums.name}")

        return Package(
            protocols=list(PROVIDER_PROTOCOLS),
            os=os,
            arch=arch,
            filename=archive.name,
            download_url=link_download_url(archive),
            shasums_url=shasums_url,
            shasums_signature_url=link_download_url(signature),
            shasum=shasum,
            signing_keys=self.signing_keys,
        )
