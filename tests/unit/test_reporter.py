from __future__ import annotations

import io

from rich.console import Console

from serve_registry.domain.models import Player
from serve_registry.registry import PlayerRegistry
from serve_registry.reporter import print_players


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def test_print_players_renders_one_row_per_player(sample_registry: PlayerRegistry) -> None:
    console, buffer = _console()

    print_players(sample_registry, console=console)

    output = buffer.getvalue()
    assert "Registered Players" in output
    assert output.index("francia") < output.index("guam") < output.index("brasil")
    assert "75.00" in output


def test_print_players_shows_threshold_caption(jp: Player) -> None:
    console, buffer = _console()

    print_players([jp], title="Effective Players", threshold=75.0, console=console)

    assert "Effectiveness >= 75.0%" in buffer.getvalue()


def test_print_players_renders_non_finite_effectiveness() -> None:
    console, buffer = _console()

    print_players([Player("Nobody", "none", 0, 0, 0)], console=console)

    assert "nan" in buffer.getvalue()


def test_print_players_escapes_markup_in_names() -> None:
    console, buffer = _console()

    print_players([Player("[bold]X[/bold]", "none", 1, 1, 10)], console=console)

    assert "[bold]X[/bold]" in buffer.getvalue()


def test_print_players_reports_empty_input() -> None:
    console, buffer = _console()

    print_players([], console=console)

    assert "No players to display." in buffer.getvalue()
