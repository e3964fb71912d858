# tests/unit/test_core/test_config.py

"""Tests for Config layering: defaults, settings.json, environment."""

from __future__ import annotations

import json

import pytest

from boardgame_collection.config import ENV_LANGUAGE, ENV_LOG_LEVEL, Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_LANGUAGE, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)


def test_defaults(tmp_path):
    cfg = Config(DATA_DIR=tmp_path)

    assert cfg.UI_LANGUAGE == "en"
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.SEED_SAMPLE_DATA is True
    assert cfg.DB_PATH == tmp_path / "boardgames.db"
    assert cfg.LOG_FILE == tmp_path / "boardgames.log"


def test_data_dir_is_created(tmp_path):
    target = tmp_path / "nested" / "data"

    Config(DATA_DIR=target)

    assert target.is_dir()


def test_settings_file_overrides_defaults(tmp_path):
    (tmp_path / "settings.json").write_text(
        json.dumps({"ui_language": "ru", "seed_sample_data": False, "db_file": "other.db"}),
        encoding="utf-8",
    )

    cfg = Config(DATA_DIR=tmp_path)

    assert cfg.UI_LANGUAGE == "ru"
    assert cfg.SEED_SAMPLE_DATA is False
    assert cfg.DB_PATH == tmp_path / "other.db"


def test_environment_wins_over_settings(tmp_path, monkeypatch):
    (tmp_path / "settings.json").write_text(json.dumps({"ui_language": "ru"}), encoding="utf-8")
    monkeypatch.setenv(ENV_LANGUAGE, "en")
    monkeypatch.setenv(ENV_LOG_LEVEL, "DEBUG")

    cfg = Config(DATA_DIR=tmp_path)

    assert cfg.UI_LANGUAGE == "en"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_corrupt_settings_keep_defaults(tmp_path):
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")

    cfg = Config(DATA_DIR=tmp_path)

    assert cfg.UI_LANGUAGE == "en"


def test_save_round_trip(tmp_path):
    cfg = Config(DATA_DIR=tmp_path)
    cfg.UI_LANGUAGE = "ru"
    cfg.LOG_LEVEL = "WARNING"
    cfg.save()

    reloaded = Config(DATA_DIR=tmp_path)

    assert reloaded.UI_LANGUAGE == "ru"
    assert reloaded.LOG_LEVEL == "WARNING"
