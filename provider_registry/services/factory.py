from __future__ import annotations

import logging
from pathlib import Path

from ..clients.gitlab_releases import GitLabReleasesClient
from ..config import Settings
from ..models import GpgPublicKey, SigningKeys
from .backend import Backend
from .fake_backend import FakeBackend
from .gitlab_backend import GitLabReleaseBackend

logger = logging.getLogger("registry.backends")


def load_signing_keys(settings: Settings) -> SigningKeys:
    armor = settings.gpg_ascii_armor
    if settings.gpg_public_key_file:
        armor = Path(settings.gpg_public_key_file).read_text(encoding="utf-8")
    if not settings.gpg_key_id or not armor:
        return SigningKeys()
    return SigningKeys(gpg_public_keys=[GpgPublicKey(key_id=settings.gpg_key_id, ascii_armor=armor)])


def build_backend(settings: Settings) -> Backend:
    """
    Select the backend once at startup; the instance is shared read-only by all requests.
    """
    kind = settings.providers_backend
    if kind == "fake":
        logger.info("Using fake providers backend")
        return FakeBackend()

    if kind == "gitlab_release":
        client = GitLabReleasesClient(
            settings.gitlab_host,
            settings.gitlab_token,
            timeout=settings.gitlab_timeout_seconds,
            per_page=settings.gitlab_per_page,
        )
        logger.info(
            "Using GitLab release backend host=%s project=%s", client.base_url, settings.gitlab_project
        )
        return GitLabReleaseBackend(
            client,
            settings.gitlab_project,
            signing_keys=load_signing_keys(settings),
        )

    raise ValueError(f"Unknown providers backend: {kind!r} (expected 'fake' or 'gitlab_release')")
