"""
Domain package for the Serve Registry.

Exports the player model used by the registry, the catalog store and the CLI.
Keep this package focused on data definitions and the derived metric.
"""

from serve_registry.domain.models import FIELD_DELIMITER, FIELD_ORDER, Player

__all__ = [
    "FIELD_DELIMITER",
    "FIELD_ORDER",
    "Player",
]
