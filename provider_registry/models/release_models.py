from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


# ─────────────────────────────────────────────────────────────
# GitLab Releases API payloads (GET /projects/:id/releases)
# Only the fields the registry reads are modelled; the rest is ignored.
# ─────────────────────────────────────────────────────────────
class RawLink(BaseModel):
    """
    A named downloadable artifact attached to a release. The name encodes either
    a checksum manifest/signature or a per-platform archive.
    """
    name: str
    url: str = ""
    direct_asset_url: str = ""


class RawAssets(BaseModel):
    links: List[RawLink] = Field(default_factory=list)


class RawRelease(BaseModel):
    tag_name: str
    assets: RawAssets = Field(default_factory=RawAssets)
