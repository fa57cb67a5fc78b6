"""
Sample catalog generator for the Serve Registry.

Implements deterministic pseudo-random player generation and writes the result
through the registry's catalog save path.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path

import typer

from serve_registry.domain.models import Player
from serve_registry.registry import PlayerRegistry

app = typer.Typer(help="Generate a synthetic player catalog (CSV).")

COUNTRIES = ["francia", "guam", "brasil", "italia", "polonia", "japon", "argentina", "cuba"]
NAME_PREFIXES = ["Ale", "Ber", "Cam", "Dan", "Emi", "Fer", "Gus", "Hug", "Ivo", "Jul"]


def _generate_players(players: int, seed: int) -> list[Player]:
    rng = random.Random(seed)
    generated: list[Player] = []
    for i in range(players):
        total_serves = rng.randint(10, 120)
        error_count = rng.randint(0, total_serves // 3)
        ace_count = rng.randint(0, (total_serves - error_count) // 4)
        generated.append(
            Player(
                f"{rng.choice(NAME_PREFIXES)}{i:04d}",
                rng.choice(COUNTRIES),
                error_count,
                ace_count,
                total_serves,
            )
        )
    return generated


def _write_catalog(csv_path: Path, players: int, seed: int) -> PlayerRegistry:
    registry = PlayerRegistry()
    for player in _generate_players(players, seed):
        registry.add(player)
    result = registry.save_to_file(csv_path)
    if not result.ok:
        raise OSError(result.error)
    return registry


@app.command()
def main(
    players: int = typer.Option(
        100,
        "--players",
        "-p",
        help="Number of players to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("jugadores.csv"),
        "--output",
        "-o",
        help="CSV output path.",
    ),
) -> None:
    """
    Generate synthetic players and save them as a catalog file.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)

    typer.echo(f"Generating {players:,} players -> {output} (seed={seed})")
    try:
        _write_catalog(output, players=players, seed=seed)
    except OSError as exc:
        typer.echo(f"Generation failed: {exc}", err=True)
        raise typer.Exit(code=1)
    duration = time.perf_counter() - start
    typer.echo(f"Catalog written in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
