from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


PROVIDER_PROTOCOLS: List[str] = ["5.0"]


# ─────────────────────────────────────────────────────────────
# Service discovery (/.well-known/terraform.json)
# ─────────────────────────────────────────────────────────────
class ServiceDiscovery(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    providers_v1: str = Field(
        default="/v1/providers/",
        alias="providers.v1",
        description="Base path of the provider registry endpoints.",
    )


# ─────────────────────────────────────────────────────────────
# Versions listing
# ─────────────────────────────────────────────────────────────
class Platform(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str
    arch: str


class VersionInfo(BaseModel):
    """
    One published version of a provider. `version` never carries a leading "v".
    """
    model_config = ConfigDict(frozen=True)

    version: str
    protocols: List[str] = Field(default_factory=lambda: list(PROVIDER_PROTOCOLS))
    platforms: List[Platform] = Field(default_factory=list)


class VersionsResponse(BaseModel):
    versions: List[VersionInfo] = Field(default_factory=list)


# ─────────────────────────────────────────────────────────────
# Package download metadata
# ─────────────────────────────────────────────────────────────
class GpgPublicKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    key_id: str
    ascii_armor: str


class SigningKeys(BaseModel):
    model_config = ConfigDict(frozen=True)

    gpg_public_keys: List[GpgPublicKey] = Field(default_factory=list)


class Package(BaseModel):
    """
    Everything a client needs to fetch and verify one provider binary for one platform.
    """
    model_config = ConfigDict(frozen=True)

    protocols: List[str] = Field(default_factory=lambda: list(PROVIDER_PROTOCOLS))
    os: str
    arch: str
    filename: str
    download_url: str
    shasums_url: str
    shasums_signature_url: str
    shasum: str
    signing_keys: SigningKeys = Field(default_factory=SigningKeys)
