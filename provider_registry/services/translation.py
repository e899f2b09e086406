"""
Release → registry translation.

Turns GitLab release records into registry `VersionInfo` / `Platform` values.
Validation is two-tiered: a release without its checksum manifest or signature
is rejected outright, while a single malformed archive name only drops that
platform from the version.
"""
from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import List, Optional

from ..models import PROVIDER_PROTOCOLS, Platform, RawLink, RawRelease, VersionInfo


VERSION_MARKER = "v"
SHASUMS_SUFFIX = "SUMS"
SIGNATURE_SUFFIX = "SUMS.sig"
ARCHIVE_EXTENSION = "zip"

SUPPORTED_OS = ("linux", "darwin", "windows", "freebsd", "openbsd", "solaris")
SUPPORTED_ARCH = ("arm", "arm64", "386", "amd64")

# SemVer 2.0.0 (https://semver.org), no leading zeros in numeric identifiers
_SEMVER_RE = re.compile(
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)(?:\.(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*))*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)
# major/minor/patch are unsigned 64-bit
MAX_VERSION_PART = 2**64 - 1


# ─────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────
class ReleaseTranslationError(ValueError):
    """A release cannot be published as a registry version."""


class InvalidVersion(ReleaseTranslationError):
    def __init__(self, tag: str, reason: str):
        super().__init__(f"invalid tag {tag!r}: {reason}")
        self.tag = tag
        self.reason = reason


class MissingSignatureLink(ReleaseTranslationError):
    def __init__(self) -> None:
        super().__init__(f"release has no link ending in {SIGNATURE_SUFFIX!r}")


class MissingShaSumsLink(ReleaseTranslationError):
    def __init__(self) -> None:
        super().__init__(f"release has no link ending in {SHASUMS_SUFFIX!r}")


class PlatformTranslationError(ValueError):
    """An asset link does not describe a supported platform archive."""


class NotZipFile(PlatformTranslationError):
    pass


class InvalidFileNameFormat(PlatformTranslationError):
    pass


class UnsupportedOS(PlatformTranslationError):
    def __init__(self, value: str):
        super().__init__(f"unsupported os: {value}")
        self.value = value


class UnsupportedArch(PlatformTranslationError):
    def __init__(self, value: str):
        super().__init__(f"unsupported architecture: {value}")
        self.value = value


# ─────────────────────────────────────────────────────────────
# Versions
# ─────────────────────────────────────────────────────────────
def parse_version_tag(tag: str) -> str:
    """
    Validate a `v{semver}` tag and return the semver part, e.g. "v1.0.3" -> "1.0.3".
    """
    if not tag.startswith(VERSION_MARKER):
        raise InvalidVersion(tag, "must be in the form v{semver}")
    candidate = tag[len(VERSION_MARKER):]
    match = _SEMVER_RE.fullmatch(candidate)
    if not match or any(int(part) > MAX_VERSION_PART for part in match.group(1, 2, 3)):
        raise InvalidVersion(tag, "must be a valid semantic version")
    return candidate


def is_archive(link: RawLink) -> bool:
    return PurePosixPath(link.name).suffix.lower() == f".{ARCHIVE_EXTENSION}"


def find_signature_link(release: RawRelease) -> Optional[RawLink]:
    return next((link for link in release.assets.links if link.name.endswith(SIGNATURE_SUFFIX)), None)


def find_shasums_link(release: RawRelease) -> Optional[RawLink]:
    return next((link for link in release.assets.links if link.name.endswith(SHASUMS_SUFFIX)), None)


def version_from_release(release: RawRelease) -> VersionInfo:
    version = parse_version_tag(release.tag_name)

    if find_signature_link(release) is None:
        raise MissingSignatureLink()
    if find_shasums_link(release) is None:
        raise MissingShaSumsLink()

    platforms: List[Platform] = []
    for link in release.assets.links:
        if not is_archive(link):
            continue
        try:
            platforms.append(platform_from_link(link))
        except PlatformTranslationError:
            continue

    return VersionInfo(version=version, protocols=list(PROVIDER_PROTOCOLS), platforms=platforms)


# ─────────────────────────────────────────────────────────────
# Platforms
# ─────────────────────────────────────────────────────────────
def platform_from_link(link: RawLink) -> Platform:
    """
    Decompose `<name>_<os>_<arch>.zip` into a Platform.

    Provider names containing "_" do not fit this scheme and are rejected.
    """
    suffix = f".{ARCHIVE_EXTENSION}"
    if not link.name.endswith(suffix):
        raise NotZipFile(link.name)

    segments = link.name[: -len(suffix)].split("_")
    if len(segments) != 3:
        raise InvalidFileNameFormat(link.name)

    _, os_name, arch = segments
    if os_name not in SUPPORTED_OS:
        raise UnsupportedOS(os_name)
    if arch not in SUPPORTED_ARCH:
        raise UnsupportedArch(arch)

    return Platform(os=os_name, arch=arch)


def find_archive_link(release: RawRelease, os: str, arch: str) -> Optional[RawLink]:
    for link in release.assets.links:
        if not is_archive(link):
            continue
        try:
            platform = platform_from_link(link)
        except PlatformTranslationError:
            continue
        if platform.os == os and platform.arch == arch:
            return link
    return None


# ─────────────────────────────────────────────────────────────
# Download helpers
# ─────────────────────────────────────────────────────────────
def link_download_url(link: RawLink) -> str:
    return link.direct_asset_url or link.url


def shasum_from_manifest(manifest: str, filename: str) -> Optional[str]:
    """
    Look up `filename` in a sha256sum-style manifest ("<digest>  <file>" per line,
    "*" marks binary mode).
    """
    for line in manifest.splitlines():
        parts = line.strip().split(None, 1)
        if len(parts) != 2:
            continue
        digest, name = parts
        if name.lstrip("*") == filename:
            return digest
    return None
