from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlsplit

import httpx
from pydantic import ValidationError

from ..models import RawRelease

logger = logging.getLogger("registry.clients.gitlab")

DEFAULT_TIMEOUT = 30.0
DEFAULT_PER_PAGE = 100
MAX_REDIRECTS = 5


class GitLabClientError(RuntimeError):
    """
    Raised for any failed call. `status` is None for transport errors and
    unusable response bodies.
    """

    def __init__(self, *, url: str, status: Optional[int] = None, body: str = "", reason: str = ""):
        detail = f"HTTP {status}" if status is not None else (reason or "request failed")
        super().__init__(f"gitlab {detail}: {url} :: {body[:500]}")
        self.url = url
        self.status = status
        self.body = body

    @property
    def not_found(self) -> bool:
        return self.status == 404


def _next_page(resp: httpx.Response, current: int) -> Optional[int]:
    """
    Page number from X-Next-Page; None when absent, malformed or not moving forward.
    """
    raw = resp.headers.get("X-Next-Page", "").strip()
    if not raw.isdigit():
        return None
    nxt = int(raw)
    if nxt <= current:
        logger.warning("gitlab.releases stop paging: X-Next-Page=%s after page %d", raw, current)
        return None
    return nxt


def normalize_host(host: str) -> str:
    host = (host or "").strip().rstrip("/")
    if host and "://" not in host:
        host = f"https://{host}"
    return host


class GitLabReleasesClient:
    """
    Thin async client for the GitLab Releases API.

    Endpoints used:
      - GET /api/v4/projects/{id}/releases   (paginated via X-Next-Page)
      - GET <asset link url>                  (checksum manifests)
    """

    def __init__(
        self,
        host: str,
        token: Optional[str] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        per_page: int = DEFAULT_PER_PAGE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = normalize_host(host)
        if not self.base_url:
            raise ValueError("GitLab host is not set")
        self.token = token
        self.per_page = per_page
        self._host = urlsplit(self.base_url).netloc
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GitLabReleasesClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ─────────────────────────────────────────────────────────────
    # Low-level request helper
    # ─────────────────────────────────────────────────────────────
    def _headers(self, url: str, accept: Optional[str] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if accept:
            headers["Accept"] = accept
        # never leak the token to a third-party asset host
        if self.token and urlsplit(url).netloc in ("", self._host):
            headers["PRIVATE-TOKEN"] = self.token
        return headers

    async def _get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        accept: Optional[str] = None,
    ) -> httpx.Response:
        """
        GET with redirects followed by hand, so the token is re-scoped on every hop
        (asset downloads redirect to their upload or object-storage location).
        """
        origin = url
        for _ in range(MAX_REDIRECTS + 1):
            try:
                resp = await self._client.get(url, params=params, headers=self._headers(url, accept))
            except httpx.HTTPError as e:
                raise GitLabClientError(url=url, reason=repr(e)) from e
            if not resp.is_redirect:
                break
            location = resp.headers.get("Location")
            if not location:
                raise GitLabClientError(url=url, status=resp.status_code, reason="redirect without Location")
            url = str(resp.url.join(location))
            params = None
            logger.debug("gitlab.get redirect %s -> %s", origin, url)
        else:
            raise GitLabClientError(url=origin, reason=f"more than {MAX_REDIRECTS} redirects")

        if resp.status_code >= 400:
            raise GitLabClientError(url=url, status=resp.status_code, body=resp.text)
        return resp

    # ─────────────────────────────────────────────────────────────
    # Public methods
    # ─────────────────────────────────────────────────────────────
    async def list_releases(self, project: str) -> List[RawRelease]:
        """
        All releases of `project` (numeric id or "group/name"), newest first as
        returned by GitLab.
        """
        path = f"/api/v4/projects/{quote(project, safe='')}/releases"
        releases: List[RawRelease] = []
        page: Optional[int] = 1
        while page is not None:
            resp = await self._get(
                path, params={"per_page": self.per_page, "page": page}, accept="application/json"
            )
            try:
                data = resp.json()
                if not isinstance(data, list):
                    raise ValueError(f"expected a list, got {type(data).__name__}")
                releases.extend(RawRelease.model_validate(item) for item in data)
            except (ValueError, ValidationError) as e:
                raise GitLabClientError(url=path, reason=f"invalid releases payload: {e}") from e
            page = _next_page(resp, page)

        logger.info("gitlab.releases <- project=%s count=%d", project, len(releases))
        return releases

    async def fetch_text(self, url: str) -> str:
        resp = await self._get(url)
        return resp.text
