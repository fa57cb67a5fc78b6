from pathlib import Path

import pytest

from scripts import generate_catalog
from serve_registry import config
from serve_registry.registry import PlayerRegistry

GENERATED_PLAYERS = 5


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.catalog_path == Path("jugadores.csv")
    assert settings.catalog_encoding == "utf-8"
    assert settings.min_effectiveness == 80.0
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("CATALOG_PATH", str(tmp_path / "players.csv"))
    monkeypatch.setenv("MIN_EFFECTIVENESS", "65.5")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = config.get_settings()

    assert settings.catalog_path == tmp_path / "players.csv"
    assert settings.min_effectiveness == 65.5
    assert settings.log_json is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_settings_accept_field_names(test_settings: config.Settings, tmp_path: Path):
    assert test_settings.catalog_path == tmp_path / "jugadores.csv"
    assert test_settings.log_level == "DEBUG"


def test_generate_catalog_writes_csv(tmp_path: Path):
    csv_path = tmp_path / "players.csv"
    generate_catalog._write_catalog(csv_path, players=GENERATED_PLAYERS, seed=123)
    assert csv_path.exists()

    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == GENERATED_PLAYERS
    assert all(len(line.split(",")) == 5 for line in lines)

    registry = PlayerRegistry()
    assert registry.load_from_file(csv_path).ok
    assert len(registry) == GENERATED_PLAYERS


def test_generate_catalog_is_deterministic():
    first = generate_catalog._generate_players(10, seed=7)
    second = generate_catalog._generate_players(10, seed=7)
    assert first == second
    assert all(p.total_serves > 0 for p in first)
