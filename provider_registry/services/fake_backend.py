from __future__ import annotations

from typing import List

from ..models import GpgPublicKey, Package, Platform, SigningKeys, VersionInfo
from .backend import Backend

RELEASES_BASE_URL = "https://releases.example.com"
EXAMPLE_SHASUM = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
EXAMPLE_KEY = GpgPublicKey(
    key_id="0123456789ABCDEF",
    ascii_armor="-----BEGIN PGP PUBLIC KEY BLOCK-----\n...\n-----END PGP PUBLIC KEY BLOCK-----",
)


class FakeBackend(Backend):
    """
    Fixed example data for local development and protocol conformance checks.
    Never fails; any os/arch is "found".
    """

    async def list_provider_versions(self, namespace: str, provider_type: str) -> List[VersionInfo]:
        return [
            VersionInfo(
                version="1.0.0",
                platforms=[
                    Platform(os="linux", arch="amd64"),
                    Platform(os="linux", arch="arm64"),
                    Platform(os="darwin", arch="amd64"),
                    Platform(os="darwin", arch="arm64"),
                    Platform(os="windows", arch="amd64"),
                ],
            ),
            VersionInfo(
                version="0.9.0",
                platforms=[Platform(os="linux", arch="amd64")],
            ),
        ]

    async def find_provider_package(
        self,
        namespace: str,
        provider_type: str,
        version: str,
        os: str,
        arch: str,
    ) -> Package:
        base = f"{RELEASES_BASE_URL}/{namespace}/{provider_type}"
        prefix = f"terraform-provider-{provider_type}_{version}"
        filename = f"{prefix}_{os}_{arch}.zip"
        return Package(
            os=os,
            arch=arch,
            filename=filename,
            download_url=f"{base}/{filename}",
            shasums_url=f"{base}/{prefix}_SHA256SUMS",
            shasums_signature_url=f"{base}/{prefix}_SHA256SUMS.sig",
            shasum=EXAMPLE_SHASUM,
            signing_keys=SigningKeys(gpg_public_keys=[EXAMPLE_KEY]),
        )
