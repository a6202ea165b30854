from pathlib import Path

import pytest

from sinesong.config import DEFAULT_SONGS_DIR, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SINESONG_SONGS_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    settings = load_settings()
    assert settings.songs_dir == Path(DEFAULT_SONGS_DIR)
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SINESONG_SONGS_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = load_settings()
    assert settings.songs_dir == tmp_path
    assert settings.log_level == "DEBUG"


def test_entry_point_configures_logging_from_settings(monkeypatch):
    import main as entry

    levels = []
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setattr(entry, "load_dotenv", lambda: None)
    monkeypatch.setattr(entry, "configure_logging", levels.append)
    monkeypatch.setattr(entry, "run_cli", lambda: 0)
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 0
    assert levels == ["WARNING"]
