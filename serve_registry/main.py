from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from serve_registry.config import get_settings
from serve_registry.domain.models import Player
from serve_registry.infrastructure.results import CatalogResult
from serve_registry.registry import PlayerRegistry
from serve_registry.reporter import print_players
from serve_registry.utils.logging import configure_logging

app = typer.Typer(help="Serve Registry CLI.", no_args_is_help=True)

CATALOG_OPTION_HELP = "Catalog CSV file (default from settings)."


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _catalog_path(catalog: Optional[Path]) -> Path:
    return catalog or get_settings().catalog_path


def _new_registry() -> PlayerRegistry:
    return PlayerRegistry(encoding=get_settings().catalog_encoding)


def _load_or_exit(registry: PlayerRegistry, path: Path) -> CatalogResult:
    result = registry.load_from_file(path)
    if not result.ok:
        typer.echo(f"Could not load catalog {path}: {result.error}", err=True)
        raise typer.Exit(code=1)
    return result


def _save_or_exit(registry: PlayerRegistry, path: Path) -> None:
    result = registry.save_to_file(path)
    if not result.ok:
        typer.echo(f"Could not save catalog {path}: {result.error}", err=True)
        raise typer.Exit(code=1)


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        typer.echo(line)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"catalog={settings.catalog_path} (encoding={settings.catalog_encoding}) | "
        f"min_effectiveness={settings.min_effectiveness} | "
        f"env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def add(
    name: str = typer.Argument(..., help="Player name."),
    country: str = typer.Argument(..., help="Player country."),
    errors: int = typer.Argument(..., help="Serving errors."),
    aces: int = typer.Argument(..., help="Aces served."),
    serves: int = typer.Argument(..., help="Total serves."),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
) -> None:
    """
    Append a player to the catalog file, creating it if needed.
    """
    path = _catalog_path(catalog)
    registry = _new_registry()
    if path.exists():
        loaded = _load_or_exit(registry, path)
        if loaded.skipped:
            typer.echo(
                f"Refusing to rewrite catalog {path}: {loaded.skipped} unreadable row(s) "
                "would be lost.",
                err=True,
            )
            raise typer.Exit(code=1)

    player = Player(name, country, errors, aces, serves)
    registry.add(player)
    _save_or_exit(registry, path)
    typer.echo(f"Added {player.describe()} ({len(registry)} players in {path})")


@app.command("list")
def list_players(
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
    table: bool = typer.Option(False, "--table", "-t", help="Render as a table."),
) -> None:
    """
    Show every player in the catalog, in file order.
    """
    path = _catalog_path(catalog)
    registry = _new_registry()
    _load_or_exit(registry, path)

    if table:
        print_players(registry, title=f"Players in {path}")
    else:
        _echo_lines(registry.list_all())


@app.command("filter")
def filter_players(
    minimum: Optional[float] = typer.Option(
        None,
        "--min",
        "-m",
        help="Minimum effectiveness percentage (default from settings).",
    ),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
    table: bool = typer.Option(False, "--table", "-t", help="Render as a table."),
) -> None:
    """
    Show players whose effectiveness is at least the given threshold.
    """
    threshold = get_settings().min_effectiveness if minimum is None else minimum
    path = _catalog_path(catalog)
    registry = _new_registry()
    _load_or_exit(registry, path)

    effective = registry.filter_by_minimum_effectiveness(threshold)
    if table:
        print_players(effective, title="Effective Players", threshold=threshold)
    else:
        _echo_lines([player.describe() for player in effective])


@app.command()
def demo(
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=CATALOG_OPTION_HELP),
) -> None:
    """
    Build a two-player registry, filter it, save it and load it back.
    """
    path = _catalog_path(catalog)
    threshold = 80.0

    registry = _new_registry()
    registry.add(Player("JP", "francia", 5, 3, 20))
    registry.add(Player("Ram", "guam", 8, 2, 25))
    _echo_lines(registry.list_all())

    typer.echo(f"\nPlayers with effectiveness >= {threshold:g}%:")
    _echo_lines([player.describe() for player in registry.filter_by_minimum_effectiveness(threshold)])

    _save_or_exit(registry, path)

    reloaded = _new_registry()
    _load_or_exit(reloaded, path)
    typer.echo(f"\nPlayers loaded from {path}:")
    _echo_lines(reloaded.list_all())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
