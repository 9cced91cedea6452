"""Rich UI components for the CLI.

Kept apart from the commands so rendering details do not leak into
request handling.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cdng_client.core.domain.models import NginxStats


def build_stats_table(stats: NginxStats) -> Table:
    """Two-column table for `GET /stats`."""

    table = Table(title="Nginx Stats")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Ports", ", ".join(stats.ports) if stats.ports else "-")
    table.add_row("Domains", str(stats.domain_count))
    table.add_row("CPU load", stats.cpu_load or "-")
    table.add_row("CPU usage", stats.cpu_usage or "-")
    table.add_row("RAM usage", stats.ram_usage or "-")
    table.add_row("Upload", stats.upload or "-")
    table.add_row("Download", stats.download or "-")
    return table


def build_status_panel(envelope: dict[str, Any]) -> Panel:
    status = envelope.get("status")
    body = Text(str(status).strip() if status is not None else "(no status reported)")
    return Panel(body, title=Text("Nginx status", style="bold cyan"), border_style="cyan")


def print_success(console: Console, envelope: dict[str, Any], fallback: str) -> None:
    message = envelope.get("message") or fallback
    console.print(Text(str(message), style="green"))


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), message))
