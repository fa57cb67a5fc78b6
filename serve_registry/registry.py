"""
In-memory player registry.

An ordered, append-only collection of Player records with display, threshold
query and catalog persistence.

Usage:
    from serve_registry.registry import PlayerRegistry

    registry = PlayerRegistry()
    registry.add(Player("JP", "francia", 5, 3, 20))
    effective = registry.filter_by_minimum_effectiveness(80.0)
    registry.save_to_file("jugadores.csv")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple

from serve_registry.domain.models import Player
from serve_registry.infrastructure.csv_store import DEFAULT_ENCODING, load_catalog, save_catalog
from serve_registry.infrastructure.results import CatalogResult


class PlayerRegistry:
    """
    Ordered store of players.

    Insertion order is preserved and duplicates are allowed. Players are never
    removed; loading a catalog appends to whatever is already registered.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self._players: List[Player] = []
        self._encoding = encoding

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    @property
    def players(self) -> Tuple[Player, ...]:
        """Snapshot of registered players in store order."""
        return tuple(self._players)

    def add(self, player: Player) -> None:
        self._players.append(player)

    def list_all(self) -> List[str]:
        """Describe every player, in store order."""
        return [player.describe() for player in self._players]

    def filter_by_minimum_effectiveness(self, threshold: float) -> List[Player]:
        """
        Players whose effectiveness is at least ``threshold``, in store order.

        Non-finite effectiveness (nan) never satisfies the comparison.
        """
        return [player for player in self._players if player.effectiveness() >= threshold]

    def save_to_file(self, path: Path | str) -> CatalogResult:
        """Overwrite ``path`` with one catalog row per player."""
        return save_catalog(path, self._players, encoding=self._encoding)

    def load_from_file(self, path: Path | str) -> CatalogResult:
        """
        Append the players stored in ``path``.

        Existing players are kept, so repeated loads accumulate.
        """
        return load_catalog(path, sink=self.add, encoding=self._encoding)


__all__ = ["PlayerRegistry"]
