"""Domain models (Pydantic v2).

These describe *what* the client exchanges with the backend, not *how*
it is transported.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    """HTTP verbs accepted by the backend."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: "str | HttpMethod") -> "HttpMethod":
        """Case-insensitive lookup; raises `ValueError` for unknown verbs."""

        if isinstance(value, HttpMethod):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unsupported HTTP method {value!r} (expected one of: {allowed})") from None

    @property
    def carries_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT)


class ClientConfig(BaseModel):
    """Immutable connection settings owned by a single client."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        ...,
        description="Backend base URL, stored without trailing slash.",
    )
    api_key: str = Field(
        ...,
        description="Static bearer token, stored verbatim.",
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

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        """Join `endpoint` to the base URL with exactly one slash."""

        return f"{self.base_url}/{endpoint.lstrip('/')}"


class NginxStats(BaseModel):
    """System statistics reported under the `stats` key of `GET /stats`."""

    model_config = ConfigDict(extra="ignore")

    ports: list[str] = Field(default_factory=list, description="Ports nginx listens on.")
    domain_count: int = Field(default=0, ge=0, description="Number of configured domains.")
    cpu_load: str = Field(default="", description="Load averages (1/5/15 min).")
    ram_usage: str = Field(default="", description="Memory usage.")
    cpu_usage: str = Field(default="", description="CPU usage percentage.")
    upload: str = Field(default="", description="Upload throughput.")
    download: str = Field(default="", description="Download throughput.")

    @field_validator("ports", mode="before")
    @classmethod
    def _ports_as_strings(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [str(v) for v in value]
        return value

    @classmethod
    def from_envelope(cls, envelope: dict[str, Any]) -> "NginxStats":
        """Build from a full `/stats` envelope (`{"ok": true, "stats": {...}}`)."""

        raw = envelope.get("stats")
        return cls.model_validate(raw if isinstance(raw, dict) else {})
