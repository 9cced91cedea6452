"""Errors raised by the cdng client.

Three failure kinds, all surfaced to the caller without local recovery:
- `TransportError`: the request never produced a response.
- `DecodeError`: a response arrived but its body is not a JSON object.
- `ApiError`: the envelope arrived with a falsy `ok` field.
"""

from __future__ import annotations

from typing import Any


class CdngError(Exception):
    """Base class for every error raised by the client."""


class TransportError(CdngError):
    """Network, DNS or timeout failure. `str()` is the raw transport error text."""


class DecodeError(CdngError):
    """The response body could not be decoded into an envelope."""

    def __init__(self, reason: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(reason)
        self.status_code = status_code
        self.body = body


class ApiError(CdngError):
    """The backend answered with `{"ok": false, ...}`."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        envelope: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.envelope = envelope or {}
