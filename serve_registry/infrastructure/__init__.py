"""
Infrastructure package for the Serve Registry.

Centralizes catalog file I/O and the result contract it reports through.
Keep this layer focused on I/O and resource management, decoupled from
registry and CLI logic.
"""

from serve_registry.infrastructure.csv_store import load_catalog, save_catalog
from serve_registry.infrastructure.results import CatalogResult, CatalogStatus

__all__ = [
    "CatalogResult",
    "CatalogStatus",
    "load_catalog",
    "save_catalog",
]
