# provider_registry/config.py
from __future__ import annotations

import os
from typing import List, Literal, Optional

from pydantic import BaseModel


class Settings(BaseModel):
    # App
    app_name: str = os.getenv("APP_NAME", "Terraform Provider Registry")
    service_name: str = os.getenv("SERVICE_NAME", "provider-registry")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Which backend answers the registry endpoints
    providers_backend: Literal["fake", "gitlab_release"] = os.getenv("PROVIDERS_BACKEND", "fake")  # type: ignore[assignment]

    # GitLab Releases backend
    gitlab_host: str = os.getenv("GITLAB_HOST", "https://gitlab.com")
    gitlab_token: Optional[str] = os.getenv("GITLAB_TOKEN") or None
    gitlab_project: Optional[str] = os.getenv("GITLAB_PROJECT") or None
    gitlab_timeout_seconds: float = float(os.getenv("GITLAB_TIMEOUT_SECONDS", "30"))
    gitlab_per_page: int = int(os.getenv("GITLAB_PER_PAGE", "100"))

    # Signing key advertised with every package
    gpg_key_id: str = os.getenv("GPG_KEY_ID", "")
    gpg_ascii_armor: str = os.getenv("GPG_ASCII_ARMOR", "")
    gpg_public_key_file: Optional[str] = os.getenv("GPG_PUBLIC_KEY_FILE") or None


settings = Settings()

__all__ = ["Settings", "settings"]
