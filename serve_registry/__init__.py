"""
Serve Registry - an in-memory registry of volleyball serving statistics.

This package provides a small, ordered player store with:

- A frozen player model with a derived serving-effectiveness percentage
- Threshold queries over the computed metric
- Plain-text catalog persistence (one comma-separated row per player)
- Console reporting (plain lines or rich tables) and a typer CLI
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from serve_registry.config import Settings, get_settings
from serve_registry.domain.models import Player
from serve_registry.infrastructure.results import CatalogResult, CatalogStatus
from serve_registry.registry import PlayerRegistry
from serve_registry.reporter import print_players
from serve_registry.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Player",
    "PlayerRegistry",
    # Persistence results
    "CatalogResult",
    "CatalogStatus",
    # Reporting
    "print_players",
    # Logging
    "configure_logging",
    "get_logger",
]
