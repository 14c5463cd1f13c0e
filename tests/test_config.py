"""Tests for configuration parsing."""

from pathlib import Path

from water_tracker.config import Settings, parse_quick_amounts
from water_tracker.domain.tracking import DEFAULT_FOCUS_MINUTES


def test_parse_quick_amounts() -> None:
    assert parse_quick_amounts("150, 300,,500") == (150, 300, 500)
    assert parse_quick_amounts("abc,-5,0") == (100, 200, 350)
    assert parse_quick_amounts(None) == (100, 200, 350)


def test_settings_read_prefixed_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("WATER_TRACK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("WATER_TRACK_DEFAULT_TARGET", "1800")
    monkeypatch.setenv("WATER_TRACK_QUICK_AMOUNTS", "250,500")
    monkeypatch.setenv("WATER_TRACK_AUTO_RESET_AT_MIDNIGHT", "false")

    settings = Settings()
    defaults = settings.tracker_defaults()

    assert settings.data_dir == Path(tmp_path)
    assert defaults.default_target == 1800
    assert defaults.quick_amounts == (250, 500)
    assert defaults.auto_reset_at_midnight is False
    assert settings.reference_time_zone == "Asia/Seoul"
    assert settings.focus_minutes == DEFAULT_FOCUS_MINUTES
    assert settings.log_level == "INFO"
