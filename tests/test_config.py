"""Tests for runtime settings."""

import logging

from source_mirror.config import DEFAULT_CONFIG, Config


def test_defaults(tmp_path):
    cfg = Config("http://x", directory=str(tmp_path), environ={})

    assert cfg.api_url == "http://x"
    assert cfg.directory == str(tmp_path)
    assert cfg.debounce_ms == DEFAULT_CONFIG["debounce_ms"] == 100
    assert cfg.debounce_seconds == 0.1
    assert cfg.log_level == "INFO"
    assert cfg.log_file == ""


def test_directory_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Config("http://x", environ={}).directory == str(tmp_path)


def test_environment_overrides():
    cfg = Config(
        "http://x",
        environ={
            "SOURCE_MIRROR_DEBOUNCE_MS": "250",
            "SOURCE_MIRROR_LOG_LEVEL": "debug",
            "SOURCE_MIRROR_LOG_FILE": " /tmp/mirror.log ",
            "SOURCE_MIRROR_LOG_BACKUP_COUNT": "7",
        },
    )

    assert cfg.debounce_ms == 250
    assert cfg.log_level == "debug"
    assert cfg.log_file == "/tmp/mirror.log"
    assert cfg.log_backup_count == 7


def test_invalid_integer_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="source_mirror.config"):
        cfg = Config("http://x", environ={"SOURCE_MIRROR_DEBOUNCE_MS": "soon"})

    assert cfg.debounce_ms == 100
    assert "SOURCE_MIRROR_DEBOUNCE_MS" in caplog.text


def test_negative_debounce_clamped():
    cfg = Config("http://x", environ={"SOURCE_MIRROR_DEBOUNCE_MS": "-5"})
    assert cfg.debounce_ms == 0
    cfg.debounce_ms = 30
    assert cfg.debounce_seconds == 0.03
