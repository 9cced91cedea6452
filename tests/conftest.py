"""Shared fixtures: a recording `httpx.MockTransport` in front of `CdngClient`."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from cdng_client.adapters.cdng_api import CdngClient

BASE_URL = "http://api.test"
API_KEY = "s3cret"


class Backend:
    """Fake cdng server: records requests and answers with a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"ok": True, "message": "done"}
        self.raw: bytes | None = None
        self.error: Callable[[httpx.Request], Exception] | None = None

    def reply(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.raw = None
        self.status_code = status_code

    def reply_raw(self, raw: bytes, status_code: int = 200) -> None:
        self.raw = raw
        self.status_code = status_code

    def fail_with(self, factory: Callable[[httpx.Request], Exception]) -> None:
        self.error = factory

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        content = self.raw if self.raw is not None else json.dumps(self.payload).encode()
        return httpx.Response(
            self.status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def backend() -> Backend:
    return Backend()


@pytest.fixture
def client(backend: Backend) -> CdngClient:
    return CdngClient(BASE_URL, API_KEY, transport=httpx.MockTransport(backend.handler))
