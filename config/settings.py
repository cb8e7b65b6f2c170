"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URI = "https://api.iterable.com/api"


class Settings(BaseSettings):
    """API token and endpoint for one client. Immutable once built."""

    model_config = SettingsConfigDict(
        env_prefix="ITERABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- API ---
    token: str = ""
    base_uri: str = DEFAULT_BASE_URI

    # --- Observability ---
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    def url_for(self, path: str) -> str:
        return f"{self.base_uri.rstrip('/')}/{path.lstrip('/')}"


_default: Settings | None = None


def get_settings() -> Settings:
    global _default
    if _default is None:
        _default = Settings()
    return _default


def configure(**fields: Any) -> Settings:
    """Replace the default settings used by resources built without one."""
    global _default
    _default = Settings(**fields)
    return _default


def reset_settings() -> None:
    global _default
    _default = None
