from __future__ import annotations

from typing import List

from provider_registry.models import RawAssets, RawLink, RawRelease

ASSET_BASE = "https://gitlab.example.com/group/provider/-/releases"


def make_link(name: str) -> RawLink:
    return RawLink(
        name=name,
        url=f"{ASSET_BASE}/assets/{name}",
        direct_asset_url=f"{ASSET_BASE}/downloads/{name}",
    )


def make_release(tag: str, names: List[str]) -> RawRelease:
    return RawRelease(tag_name=tag, assets=RawAssets(links=[make_link(n) for n in names]))
