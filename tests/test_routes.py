"""Protocol-level tests for the registry HTTP endpoints."""

from __future__ import annotations

import logging
from typing import List

import pytest
from fastapi.testclient import TestClient

from provider_registry.main import create_app
from provider_registry.models import Package, VersionInfo
from provider_registry.services import Backend, FakeBackend, GitLabReleaseBackend, NotFoundError, StorageError


class RaisingBackend(Backend):
    def __init__(self, error: Exception) -> None:
        self.error = error

    async def list_provider_versions(self, namespace: str, provider_type: str) -> List[VersionInfo]:
        raise self.error

    async def find_provider_package(self, namespace, provider_type, version, os, arch) -> Package:
        raise self.error


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(backend=FakeBackend()))


def test_service_discovery(client: TestClient) -> None:
    resp = client.get("/.well-known/terraform.json")
    assert resp.status_code == 200
    assert resp.json() == {"providers.v1": "/v1/providers/"}


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.text == "OK"
    assert resp.headers["content-type"].startswith("text/plain")


def test_list_versions(client: TestClient) -> None:
    resp = client.get("/v1/providers/hashicorp/aws/versions")
    assert resp.status_code == 200
    versions = resp.json()["versions"]
    assert versions
    assert versions[0] == {
        "version": "1.0.0",
        "protocols": ["5.0"],
        "platforms": [
            {"os": "linux", "arch": "amd64"},
            {"os": "linux", "arch": "arm64"},
            {"os": "darwin", "arch": "amd64"},
            {"os": "darwin", "arch": "arm64"},
            {"os": "windows", "arch": "amd64"},
        ],
    }


def test_download(client: TestClient) -> None:
    resp = client.get("/v1/providers/hashicorp/aws/1.0.0/download/linux/amd64")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {
        "protocols",
        "os",
        "arch",
        "filename",
        "download_url",
        "shasums_url",
        "shasums_signature_url",
        "shasum",
        "signing_keys",
    }
    assert body["filename"] == "terraform-provider-aws_1.0.0_linux_amd64.zip"
    assert body["signing_keys"]["gpg_public_keys"][0].keys() == {"key_id", "ascii_armor"}


def test_correlation_id_is_echoed(client: TestClient) -> None:
    resp = client.get("/health", headers={"X-Correlation-ID": "abc123"})
    assert resp.headers["X-Correlation-ID"] == "abc123"
    assert client.get("/health").headers["X-Correlation-ID"]


@pytest.mark.parametrize(
    "error,status",
    [(NotFoundError("missing"), 404), (StorageError("upstream down"), 500)],
)
@pytest.mark.parametrize(
    "path",
    ["/v1/providers/ns/p/versions", "/v1/providers/ns/p/1.0.0/download/linux/amd64"],
)
def test_backend_errors_map_to_status(error: Exception, status: int, path: str) -> None:
    client = TestClient(create_app(backend=RaisingBackend(error)))
    resp = client.get(path)
    assert resp.status_code == status


def test_gitlab_without_project_is_500() -> None:
    class _NoCalls:
        async def aclose(self) -> None:
            pass

    client = TestClient(create_app(backend=GitLabReleaseBackend(_NoCalls(), None)))
    assert client.get("/v1/providers/hashicorp/aws/versions").status_code == 500


def test_lifespan_builds_backend_from_settings(monkeypatch) -> None:
    from provider_registry import main

    monkeypatch.setattr(main.settings, "providers_backend", "fake")
    with TestClient(main.create_app()) as client:
        assert isinstance(client.app.state.backend, FakeBackend)
        assert client.get("/v1/providers/hashicorp/aws/versions").status_code == 200


def test_access_line_names_backend_and_correlation_id(caplog) -> None:
    access = logging.getLogger("registry.access")
    access.addHandler(caplog.handler)
    caplog.handler.setLevel(logging.INFO)
    access.setLevel(logging.INFO)
    # caplog.handler is also on the root logger; stop propagation so each line is captured once
    propagate = access.propagate
    access.propagate = False
    try:
        TestClient(create_app(backend=FakeBackend())).get(
            "/v1/providers/hashicorp/aws/versions", headers={"X-Correlation-ID": "corr-42"}
        )
        TestClient(create_app(backend=RaisingBackend(StorageError("down")))).get("/v1/providers/ns/p/versions")
    finally:
        access.removeHandler(caplog.handler)
        access.propagate = propagate

    ok, failed = [r for r in caplog.records if r.name == "registry.access"]
    assert "GET /v1/providers/hashicorp/aws/versions -> 200" in ok.getMessage()
    assert "backend=FakeBackend" in ok.getMessage()
    assert "corr=corr-42" in ok.getMessage()
    assert ok.levelno == logging.INFO
    assert "-> 500 backend=RaisingBackend" in failed.getMessage()
    assert failed.levelno == logging.WARNING
