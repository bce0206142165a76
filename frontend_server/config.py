"""
Configuration and settings for the frontend server.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BACKEND_URL = "http://localhost:5000/api"
DEFAULT_BODY_LIMIT = 100 * 1024
WILDCARD_ORIGIN = "*"


class Settings(BaseSettings):
    """Environment-backed settings, read once at process start."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # Listener
    frontend_host: str = Field(default="0.0.0.0")
    frontend_port: int = Field(default=3000, ge=0, le=65535)

    # Advertised to the client, never proxied
    backend_url: str = Field(default=DEFAULT_BACKEND_URL)

    # Only reported in the startup banner
    node_env: str = Field(default="development")

    # Built SPA assets
    static_dir: Path = Field(default=Path("public"), validate_default=True)
    index_document: str = Field(default="index.html")

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: [WILDCARD_ORIGIN])
    cors_allow_credentials: bool = Field(default=True)

    # Largest JSON or form body accepted, in bytes
    body_limit: int = Field(default=DEFAULT_BODY_LIMIT, gt=0)

    log_level: str = Field(default="INFO")

    @field_validator("static_dir")
    @classmethod
    def _resolve_static_dir(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def index_path(self) -> Path:
        return self.static_dir / self.index_document

    @property
    def allows_any_origin(self) -> bool:
        return WILDCARD_ORIGIN in self.cors_origins

    @property
    def cors_credentials_enabled(self) -> bool:
        """
        Credentials are only honoured for an explicit origin list. Browsers
        reject a credentialed response carrying ``Access-Control-Allow-Origin: *``.
        """
        return self.cors_allow_credentials and not self.allows_any_origin


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
