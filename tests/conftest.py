"""
Pytest configuration for the Serve Registry.

Provides fixtures for:
- Settings isolation (environment overrides and cache reset)
- Sample players and a pre-filled registry
- Temporary catalog files
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from serve_registry.config import Settings, get_settings
from serve_registry.domain.models import Player
from serve_registry.registry import PlayerRegistry

SETTINGS_ENV_VARS = (
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "CATALOG_PATH",
    "CATALOG_ENCODING",
    "MIN_EFFECTIVENESS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear settings-related environment variables and the cached Settings instance.

    Tests that need overrides set them with monkeypatch before calling get_settings().
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        catalog_path=tmp_path / "jugadores.csv",
        log_level="DEBUG",
    )


@pytest.fixture
def jp() -> Player:
    """Effectiveness exactly 75.0."""
    return Player("JP", "francia", 5, 3, 20)


@pytest.fixture
def ram() -> Player:
    """Effectiveness (17/33 + 2/25) * 100, roughly 59.5."""
    return Player("Ram", "guam", 8, 2, 25)


@pytest.fixture
def ace() -> Player:
    """Effectiveness (19/21 + 6/20) * 100, roughly 120.5."""
    return Player("Ace", "brasil", 1, 6, 20)


@pytest.fixture
def sample_registry(jp: Player, ram: Player, ace: Player) -> PlayerRegistry:
    registry = PlayerRegistry()
    registry.add(jp)
    registry.add(ram)
    registry.add(ace)
    return registry


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Path to a not-yet-existing catalog file in a temp directory."""
    return tmp_path / "jugadores.csv"


@pytest.fixture
def write_catalog(tmp_path: Path):
    """
    Factory writing raw catalog text to a temp file and returning its path.
    """

    def _write(text: str, name: str = "catalog.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
