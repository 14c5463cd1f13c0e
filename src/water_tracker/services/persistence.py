"""Typed access to the persisted tracker records."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from water_tracker.domain.errors import DeserializationError
from water_tracker.domain.payloads import (
    decode_focus_day,
    decode_history,
    decode_settings,
    decode_today,
    encode_focus_day,
    encode_history,
    encode_settings,
    encode_today,
)
from water_tracker.domain.tracking import (
    DailySummary,
    DaySnapshot,
    FocusDay,
    TrackerSettings,
)
from water_tracker.services.storage import KeyValueStore

SETTINGS_KEY = "WaterTrack.Settings"
TODAY_KEY = "WaterTrack.TodayData"
HISTORY_KEY = "WaterTrack.History"
FOCUS_KEY = "FocusTimer.Today"

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class LoadStatus(Enum):
    """Outcome of reading a persisted record."""

    ABSENT = "absent"
    CORRUPT = "corrupt"
    PRESENT = "present"


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """A loaded value together with how it was obtained."""

    status: LoadStatus
    value: T | None = None
    error: DeserializationError | None = None

    @property
    def is_present(self) -> bool:
        return self.status is LoadStatus.PRESENT

    def value_or(self, default: T) -> T:
        """Return the value when present, otherwise the default."""
        if self.status is LoadStatus.PRESENT and self.value is not None:
            return self.value
        return default


@dataclass
class StatePersistence:
    """Reads and writes settings, today's snapshot, history and focus tally."""

    store: KeyValueStore

    def load_settings(self) -> LoadResult[TrackerSettings]:
        return self._load(SETTINGS_KEY, decode_settings)

    def save_settings(self, settings: TrackerSettings) -> None:
        self.store.set(SETTINGS_KEY, encode_settings(settings))

    def load_today(self) -> LoadResult[DaySnapshot]:
        return self._load(TODAY_KEY, decode_today)

    def save_today(self, snapshot: DaySnapshot) -> None:
        self.store.set(TODAY_KEY, encode_today(snapshot))

    def load_history(self) -> LoadResult[tuple[DailySummary, ...]]:
        return self._load(HISTORY_KEY, decode_history)

    def save_history(self, history: tuple[DailySummary, ...]) -> None:
        self.store.set(HISTORY_KEY, encode_history(history))

    def load_focus_day(self) -> LoadResult[FocusDay]:
        return self._load(FOCUS_KEY, decode_focus_day)

    def save_focus_day(self, focus_day: FocusDay) -> None:
        self.store.set(FOCUS_KEY, encode_focus_day(focus_day))

    def _load(self, key: str, decode: Callable[[str, str], T]) -> LoadResult[T]:
        raw = self.store.get(key)
        if raw is None:
            return LoadResult(status=LoadStatus.ABSENT)
        try:
            value = decode(key, raw)
        except DeserializationError as exc:
            _logger.warning("Discarding unreadable record: %s", exc)
            return LoadResult(status=LoadStatus.CORRUPT, error=exc)
        return LoadResult(status=LoadStatus.PRESENT, value=value)
