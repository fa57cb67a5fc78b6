from __future__ import annotations

import math
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from serve_registry.domain.models import Player


def _format_effectiveness(value: float, threshold: Optional[float]) -> str:
    text = f"{value:.2f}"
    if not math.isfinite(value):
        return f"[dim]{text}[/dim]"
    if threshold is not None and value >= threshold:
        return f"[bold green]{text}[/bold green]"
    return text


def print_players(
    players: Iterable[Player],
    title: str = "Registered Players",
    threshold: Optional[float] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render players as a rich table, in the order given.

    When ``threshold`` is set, effectiveness values at or above it are highlighted
    and the threshold is shown in the caption.
    """
    console = console or Console()
    rows = list(players)

    if not rows:
        console.print("[yellow]No players to display.[/yellow]")
        return

    caption = f"Effectiveness >= {threshold:.1f}%" if threshold is not None else None
    table = Table(title=title, box=box.ROUNDED, caption=caption)

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Country", style="magenta")
    table.add_column("Errors", justify="right", style="red")
    table.add_column("Aces", justify="right", style="yellow")
    table.add_column("Serves", justify="right", style="blue")
    table.add_column("Effectiveness (%)", justify="right", style="green")

    for player in rows:
        table.add_row(
            escape(player.name),
            escape(player.country),
            str(player.error_count),
            str(player.ace_count),
            str(player.total_serves),
            _format_effectiveness(player.effectiveness(), threshold),
        )

    console.print(table)


__all__ = ["print_players"]
