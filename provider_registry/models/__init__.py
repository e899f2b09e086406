from .registry_models import (
    PROVIDER_PROTOCOLS,
    ServiceDiscovery,
    Platform,
    VersionInfo,
    VersionsResponse,
    GpgPublicKey,
    SigningKeys,
    Package,
)
from .release_models import RawLink, RawAssets, RawRelease
