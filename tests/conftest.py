"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from water_tracker.domain.tracking import DaySnapshot, DrinkRecord, TrackerSettings
from water_tracker.services.clock import Clock
from water_tracker.services.day_tracker import DayTracker
from water_tracker.services.history import HistoryStore
from water_tracker.services.persistence import StatePersistence
from water_tracker.services.settings import SettingsService
from water_tracker.services.storage import InMemoryKeyValueStore

SEOUL = ZoneInfo("Asia/Seoul")


def seoul_time(day: int, hour: int = 10, minute: int = 0, month: int = 1) -> datetime:
    """Return an instant in January 2025 expressed in Seoul time."""
    return datetime(2025, month, day, hour, minute, tzinfo=SEOUL)


@dataclass
class FixedClock(Clock):
    """Clock returning a settable instant."""

    current: datetime

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


def seed_today(
    persistence: StatePersistence,
    amounts: list[int],
    day: str,
    target: int = 2000,
) -> DaySnapshot:
    """Persist a snapshot holding records with the given amounts, newest first."""
    records = tuple(
        DrinkRecord.create(amount, seoul_time(1, hour=20 - i))
        for i, amount in enumerate(amounts)
    )
    snapshot = DaySnapshot(
        target=target, records=records, last_saved_day_identifier=day
    )
    persistence.save_today(snapshot)
    return snapshot


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def persistence(store: InMemoryKeyValueStore) -> StatePersistence:
    return StatePersistence(store)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(seoul_time(2))


@pytest.fixture
def settings_service(persistence: StatePersistence) -> SettingsService:
    return SettingsService(persistence, defaults=TrackerSettings())


@pytest.fixture
def history_store(persistence: StatePersistence) -> HistoryStore:
    return HistoryStore(persistence)


@pytest.fixture
def make_tracker(
    persistence: StatePersistence,
    history_store: HistoryStore,
    settings_service: SettingsService,
    clock: FixedClock,
) -> Callable[[], DayTracker]:
    """Build a tracker over the shared fixtures after tests seed storage."""

    def factory() -> DayTracker:
        return DayTracker(
            persistence=persistence,
            history_store=history_store,
            settings_service=settings_service,
            clock=clock,
            tz=SEOUL,
        )

    return factory
