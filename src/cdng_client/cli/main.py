"""`cdng-client` command line.

One command per backend operation. Connection settings come from
`ClientSettings` (env vars / `.env`) and can be overridden per invocation
with the global options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cdng_client.adapters.cdng_api import CdngClient
from cdng_client.cli.ui_components import (
    build_stats_table,
    build_status_panel,
    print_error,
    print_success,
)
from cdng_client.core.config import ClientSettings, write_user_env_vars
from cdng_client.core.domain.models import NginxStats
from cdng_client.core.errors import CdngError
from cdng_client.core.interfaces.remote import NginxRemote

app = typer.Typer(
    no_args_is_help=True,
    help="Manage a remote cdng nginx proxy (domains, ports, service lifecycle).",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@dataclass
class _State:
    settings: ClientSettings
    as_json: bool = False


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False, rich_tracebacks=False)],
        force=True,
    )


def build_remote(settings: ClientSettings) -> NginxRemote:
    return CdngClient.from_settings(settings)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="API base URL (env: CDNG_BASE_URL)."),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Bearer token (env: CDNG_API_KEY)."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Request timeout in seconds."),
    verify_tls: Optional[bool] = typer.Option(
        None,
        "--verify-tls/--no-verify-tls",
        help="Verify the server TLS certificate (default: off).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON envelope."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    overrides: dict[str, Any] = {
        "base_url": base_url,
        "api_key": api_key,
        "timeout_seconds": timeout,
        "verify_tls": verify_tls,
    }
    try:
        settings = ClientSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        print_error(_err_console, f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = _State(settings=settings, as_json=as_json)


def _call(ctx: typer.Context, operation: Callable[[NginxRemote], dict[str, Any]]) -> dict[str, Any]:
    state: _State = ctx.obj
    try:
        remote = build_remote(state.settings)
        return operation(remote)
    except (CdngError, ValueError) as exc:
        print_error(_err_console, str(exc) or exc.__class__.__name__)
        raise typer.Exit(code=1) from exc


def _report(ctx: typer.Context, envelope: dict[str, Any], fallback: str) -> None:
    state: _State = ctx.obj
    if state.as_json:
        _console.print_json(data=envelope)
        return
    print_success(_console, envelope, fallback)


@app.command("add-domain")
def add_domain(
    ctx: typer.Context,
    domain: str = typer.Argument(..., help="Domain name, e.g. example.com."),
    ip: str = typer.Argument(..., help="Upstream IP address."),
) -> None:
    """Add a new domain."""

    envelope = _call(ctx, lambda remote: remote.add_domain(domain, ip))
    _report(ctx, envelope, "Domain added successfully.")


@app.command("delete-domain")
def delete_domain(
    ctx: typer.Context,
    domain: str = typer.Argument(..., help="Domain name to remove."),
) -> None:
    """Delete a domain."""

    envelope = _call(ctx, lambda remote: remote.delete_domain(domain))
    _report(ctx, envelope, "Domain deleted successfully.")


@app.command("add-port")
def add_port(
    ctx: typer.Context,
    port: str = typer.Argument(..., help="Port nginx should listen on."),
) -> None:
    """Add a new port."""

    envelope = _call(ctx, lambda remote: remote.add_port(port))
    _report(ctx, envelope, "Port added successfully.")


@app.command("delete-port")
def delete_port(
    ctx: typer.Context,
    port: str = typer.Argument(..., help="Port to stop listening on."),
) -> None:
    """Delete a port."""

    envelope = _call(ctx, lambda remote: remote.delete_port(port))
    _report(ctx, envelope, "Port deleted successfully.")


@app.command()
def status(ctx: typer.Context) -> None:
    """Show nginx service status."""

    envelope = _call(ctx, lambda remote: remote.get_status())
    if ctx.obj.as_json:
        _console.print_json(data=envelope)
        return
    _console.print(build_status_panel(envelope))


@app.command()
def reload(ctx: typer.Context) -> None:
    """Reload nginx."""

    envelope = _call(ctx, lambda remote: remote.reload_nginx())
    _report(ctx, envelope, "Nginx reloaded successfully.")


@app.command()
def stop(ctx: typer.Context) -> None:
    """Stop nginx."""

    envelope = _call(ctx, lambda remote: remote.stop_nginx())
    _report(ctx, envelope, "Nginx stopped successfully.")


@app.command()
def restart(ctx: typer.Context) -> None:
    """Restart nginx."""

    envelope = _call(ctx, lambda remote: remote.restart_nginx())
    _report(ctx, envelope, "Nginx restarted successfully.")


@app.command()
def stats(ctx: typer.Context) -> None:
    """Get system statistics."""

    envelope = _call(ctx, lambda remote: remote.get_stats())
    if ctx.obj.as_json:
        _console.print_json(data=envelope)
        return
    _console.print(build_stats_table(NginxStats.from_envelope(envelope)))


@app.command()
def configure(ctx: typer.Context) -> None:
    """Store the API base URL and key in the user config .env."""

    settings: ClientSettings = ctx.obj.settings
    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()
    api_key = typer.prompt("API key", hide_input=True).strip()
    verify_tls = typer.confirm("Verify TLS certificates?", default=settings.verify_tls)

    if not base_url or not api_key:
        raise typer.BadParameter("base URL and API key are required")

    env_path = write_user_env_vars(
        {
            "CDNG_BASE_URL": base_url,
            "CDNG_API_KEY": api_key,
            "CDNG_VERIFY_TLS": "true" if verify_tls else "false",
        }
    )
    logger.debug("Wrote settings to %s", env_path)
    _console.print(f"[green]Saved config to:[/green] {env_path}")


def run() -> None:
    app()
