"""Client configuration.

Responsibility:
- Read connection settings from env vars / `.env` files (pydantic-settings).
- Keep the per-user `.env` in a predictable place so `cdng-client configure`
  can persist the backend URL and API key.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_APP_DIR_NAME = "cdng-client"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / _APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / _APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / _APP_DIR_NAME
    return Path.home() / ".config" / _APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str | None]:
    """Values stored in the user's global `.env` (empty when it does not exist)."""

    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    return dict(dotenv_values(env_path, encoding="utf-8"))


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write or update variables in the user's global `.env`.

    Existing keys not present in `values` are kept; `None` values are skipped.
    Values are always quoted so `#`, spaces and quotes survive a reload.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# cdng-client user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is None:
            continue
        set_key(env_path, key, value, quote_mode="always", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Settings for talking to a cdng backend.

    Every field can be set through a `CDNG_`-prefixed environment variable,
    e.g. `CDNG_BASE_URL` or `CDNG_API_KEY`.
    """

    model_config = SettingsConfigDict(
        env_prefix="CDNG_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user config written by `configure`.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://127.0.0.1:8080",
        min_length=1,
        description="Base URL of the cdng API server.",
    )
    api_key: str | None = Field(
        default=None,
        description="Bearer token expected by the API server.",
    )
    timeout_seconds: float = Field(
        default=3.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    verify_tls: bool = Field(
        default=False,
        description="Verify the server certificate and hostname.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()
