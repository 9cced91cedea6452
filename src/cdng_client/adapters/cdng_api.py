"""HTTP client for the cdng nginx management API.

Responsibility:
- Turn method calls into one synchronous HTTP request each.
- Authenticate with a static bearer token.
- Decode the `{"ok": ..., "message": ...}` envelope into a result or an error.

Success is decided by the envelope's `ok` field only; the HTTP status code is
kept for diagnostics.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from cdng_client.adapters.http_client import build_client
from cdng_client.core.config import ClientSettings
from cdng_client.core.domain.models import ClientConfig, HttpMethod
from cdng_client.core.errors import ApiError, DecodeError, TransportError

logger = logging.getLogger(__name__)

_BODY_PREVIEW_CHARS = 200


def _path_segment(value: object) -> str:
    return quote(str(value), safe="")


class CdngClient:
    """Stateless client: holds only an immutable `ClientConfig`."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout_seconds: float = 3.0,
        verify_tls: bool | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """`verify_tls=None` keeps the default (no verification) without the warning
        logged for an explicit `False`."""

        self._config = ClientConfig(
            base_url=base_url,
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            verify_tls=bool(verify_tls),
        )
        self._transport = transport
        if not self._config.verify_tls:
            logger.log(
                logging.INFO if verify_tls is None else logging.WARNING,
                "TLS certificate verification is disabled for %s",
                self._config.base_url,
            )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "CdngClient":
        settings = settings or ClientSettings()
        if not settings.api_key:
            raise ValueError("An API key is required (set CDNG_API_KEY or run `cdng-client configure`).")
        return cls(
            settings.base_url,
            settings.api_key,
            timeout_seconds=settings.timeout_seconds,
            verify_tls=settings.verify_tls if "verify_tls" in settings.model_fields_set else None,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def request(
        self,
        method: str | HttpMethod,
        endpoint: str,
        body: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the decoded envelope.

        Raises:
            ValueError: unsupported HTTP method.
            TransportError: the request failed before a response arrived.
            DecodeError: the body is empty, not JSON, or not a JSON object.
            ApiError: the envelope's `ok` field is falsy.
        """

        verb = HttpMethod.parse(method)
        url = self._config.url_for(endpoint)

        content: bytes | None = None
        if verb.carries_body:
            content = json.dumps(dict(body or {})).encode("utf-8")

        logger.debug("%s %s", verb.value, url)
        try:
            with build_client(self._config, transport=self._transport) as client:
                response = client.request(verb.value, url, content=content)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Non-ASCII API keys fail while httpx encodes the headers.
            logger.debug("%s %s failed: %s", verb.value, url, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        status_code = response.status_code
        logger.debug("%s %s -> HTTP %s", verb.value, url, status_code)

        envelope = self._decode(response)
        if not envelope.get("ok"):
            message = envelope.get("message")
            raise ApiError(
                "" if message is None else str(message),
                status_code=status_code,
                envelope=envelope,
            )
        return envelope

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        text = response.text
        preview = text[:_BODY_PREVIEW_CHARS]
        if not text.strip():
            raise DecodeError("Empty response body", status_code=response.status_code, body=preview)
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise DecodeError(
                f"Response body is not valid JSON: {exc}",
                status_code=response.status_code,
                body=preview,
            ) from exc
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(data).__name__}",
                status_code=response.status_code,
                body=preview,
            )
        return data

    # -- domains -------------------------------------------------------------

    def add_domain(self, domain: str, ip: str) -> dict[str, Any]:
        return self.request(HttpMethod.POST, "add-domain", {"domain": domain, "ip": ip})

    def delete_domain(self, domain: str) -> dict[str, Any]:
        return self.request(HttpMethod.DELETE, f"delete-domain/{_path_segment(domain)}")

    # -- ports ---------------------------------------------------------------

    def add_port(self, port: int | str) -> dict[str, Any]:
        # The server binds `port` to a string field.
        return self.request(HttpMethod.POST, "add-port", {"port": str(port)})

    def delete_port(self, port: int | str) -> dict[str, Any]:
        return self.request(HttpMethod.DELETE, f"delete-port/{_path_segment(port)}")

    # -- nginx ---------------------------------------------------------------

    def get_status(self) -> dict[str, Any]:
        return self.request(HttpMethod.GET, "status")

    def reload_nginx(self) -> dict[str, Any]:
        return self.request(HttpMethod.POST, "reload")

    def stop_nginx(self) -> dict[str, Any]:
        return self.request(HttpMethod.POST, "stop")

    def restart_nginx(self) -> dict[str, Any]:
        return self.request(HttpMethod.POST, "restart")

    def get_stats(self) -> dict[str, Any]:
        return self.request(HttpMethod.GET, "stats")
