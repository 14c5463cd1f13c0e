"""Tests for the focus tally."""

import pytest

from water_tracker.domain.errors import InvalidAmountError
from water_tracker.services.focus import FocusTally
from tests.conftest import SEOUL, seoul_time


@pytest.fixture
def tally(persistence, clock) -> FocusTally:
    return FocusTally(persistence=persistence, clock=clock, tz=SEOUL)


def test_sessions_accumulate_within_a_day(tally) -> None:
    tally.record_focus_session()
    total = tally.record_focus_session(minutes=10)

    assert total == 35
    assert tally.today_minutes() == 35


def test_new_day_starts_from_zero(tally, clock, persistence) -> None:
    tally.record_focus_session()

    clock.current = seoul_time(3, hour=0, minute=1)

    assert tally.today_minutes() == 0
    assert persistence.load_focus_day().value.day_identifier == "2025-01-03"


def test_explicit_now_overrides_clock(tally) -> None:
    tally.record_focus_session(now=seoul_time(5))

    assert tally.today_minutes(now=seoul_time(5, hour=22)) == 25
    assert tally.today_minutes() == 0


def test_rejects_non_positive_minutes(tally) -> None:
    with pytest.raises(InvalidAmountError):
        tally.record_focus_session(minutes=0)

    assert tally.today_minutes() == 0
