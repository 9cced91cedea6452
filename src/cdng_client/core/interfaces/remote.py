"""Contract for the cdng remote API.

A structural `Protocol` lets the CLI work against any object exposing the
backend operations (the HTTP client, or a fake in tests).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NginxRemote(Protocol):
    """Operations exposed by a cdng backend.

    Every call returns the full decoded envelope (`{"ok": true, ...}`) and
    raises `core.errors.CdngError` subclasses on failure.
    """

    def add_domain(self, domain: str, ip: str) -> dict[str, Any]: ...

    def delete_domain(self, domain: str) -> dict[str, Any]: ...

    def add_port(self, port: int | str) -> dict[str, Any]: ...

    def delete_port(self, port: int | str) -> dict[str, Any]: ...

    def get_status(self) -> dict[str, Any]: ...

    def reload_nginx(self) -> dict[str, Any]: ...

    def stop_nginx(self) -> dict[str, Any]: ...

    def restart_nginx(self) -> dict[str, Any]: ...

    def get_stats(self) -> dict[str, Any]: ...
