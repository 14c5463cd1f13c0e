"""Tests for container wiring."""

from water_tracker.config import Settings
from water_tracker.containers import build_container
from tests.conftest import FixedClock, seoul_time


def test_build_container_creates_services(tmp_path) -> None:
    container = build_container(Settings(data_dir=tmp_path))

    assert container.day_tracker is not None
    assert container.focus_tally.session_minutes == 25
    container.close_resources()


def test_container_tracks_across_restarts(tmp_path) -> None:
    settings = Settings(data_dir=tmp_path, default_target=1500)
    clock = FixedClock(seoul_time(1, hour=21))

    first = build_container(settings, clock=clock)
    first.day_tracker.reset_if_needed()
    first.day_tracker.add(300)

    clock.current = seoul_time(2, hour=8)
    second = build_container(settings, clock=clock)
    state = second.day_tracker.reset_if_needed()

    assert (tmp_path / "WaterTrack.TodayData.json").exists()
    assert state.total == 0
    assert state.target == 1500
    assert [entry.total for entry in second.day_tracker.history] == [300]
