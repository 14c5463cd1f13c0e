"""Current-day intake tracking and daily rollover."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from zoneinfo import ZoneInfo

from water_tracker.domain.days import day_identifier
from water_tracker.domain.errors import (
    IndexOutOfRangeError,
    InvalidAmountError,
    InvalidTargetError,
)
from water_tracker.domain.tracking import (
    DailySummary,
    DayState,
    DaySnapshot,
    DrinkRecord,
)
from water_tracker.services.clock import Clock
from water_tracker.services.history import HistoryStore
from water_tracker.services.persistence import LoadStatus, StatePersistence
from water_tracker.services.settings import SettingsService

_logger = logging.getLogger(__name__)


@dataclass
class DayTracker:
    """Owns today's records and target and archives finished days.

    Mutating operations return the resulting ``DayState``. Invalid input is
    logged and ignored, leaving the previous state in place.
    """

    persistence: StatePersistence
    history_store: HistoryStore
    settings_service: SettingsService
    clock: Clock
    tz: ZoneInfo
    _snapshot: DaySnapshot = field(init=False, repr=False)

    def __post_init__(self) -> None:
        result = self.persistence.load_today()
        if result.status is LoadStatus.PRESENT and result.value is not None:
            self._snapshot = result.value
        else:
            self._snapshot = DaySnapshot.empty(
                self.settings_service.default_target, self._today()
            )

    @property
    def state(self) -> DayState:
        return DayState.of(self._snapshot)

    @property
    def total(self) -> int:
        return self._snapshot.total

    @property
    def target(self) -> int:
        return self._snapshot.target

    @property
    def records(self) -> tuple[DrinkRecord, ...]:
        return self._snapshot.records

    @property
    def history(self) -> tuple[DailySummary, ...]:
        return self.history_store.all()

    @property
    def progress(self) -> float:
        return self.state.progress

    def add(self, amount: int) -> DayState:
        """Record an intake of ``amount`` millilitres as the newest entry."""
        try:
            record = DrinkRecord.create(amount, self.clock.now())
        except InvalidAmountError as exc:
            _logger.warning("Rejected intake: %s", exc)
            return self.state
        return self._commit(self._snapshot.with_record(record))

    def delete_records(self, indices: Iterable[int]) -> DayState:
        """Remove the records at the given positions, all or nothing."""
        try:
            snapshot = self._snapshot.without_indices(indices)
        except IndexOutOfRangeError as exc:
            _logger.warning("Rejected deletion: %s", exc)
            return self.state
        return self._commit(snapshot)

    def update_target(self, new_target: int) -> DayState:
        """Change today's target and make it the default for future days."""
        try:
            snapshot = self._snapshot.with_target(new_target)
        except InvalidTargetError as exc:
            _logger.warning("Rejected target: %s", exc)
            return self.state
        state = self._commit(snapshot)
        self.settings_service.set_default_target(new_target)
        return state

    def reset_if_needed(self, now: datetime | None = None) -> DayState:
        """Archive and reset when the calendar day changed since the last save.

        Safe to call on every activation: once a day has been rolled over,
        later calls on the same day leave the state untouched.
        """
        current_day = day_identifier(now or self.clock.now(), self.tz)
        result = self.persistence.load_today()
        if result.status is not LoadStatus.PRESENT or result.value is None:
            if result.status is LoadStatus.CORRUPT:
                _logger.warning("Today's data unreadable, starting a fresh day")
            self._reset(current_day)
            return self.state

        stored = result.value
        stored_day = stored.last_saved_day_identifier
        if stored_day == current_day:
            if self._snapshot.target != stored.target:
                self._snapshot = replace(self._snapshot, target=stored.target)
            return self.state

        if not self.settings_service.auto_reset_at_midnight:
            return self.state

        if stored_day > current_day:
            _logger.warning(
                "Stored day %s is ahead of current day %s; rolling over anyway",
                stored_day,
                current_day,
            )
        self._archive_and_reset(stored_day, current_day)
        return self.state

    def manual_reset(self, confirmed: bool = False) -> DayState:
        """Reset today on request.

        An empty day is reset straight away. A day with records is archived
        and reset only when ``confirmed`` is true.
        """
        current_day = self._today()
        if not self._snapshot.records:
            self._reset(current_day)
            return self.state
        if not confirmed:
            return self.state
        result = self.persistence.load_today()
        archived_day = (
            result.value.last_saved_day_identifier
            if result.status is LoadStatus.PRESENT and result.value is not None
            else current_day
        )
        self._archive_and_reset(archived_day, current_day)
        return self.state

    def _archive_and_reset(self, archived_day: str, current_day: str) -> None:
        if self._snapshot.records:
            self.history_store.archive(
                DailySummary.from_snapshot(self._snapshot, archived_day)
            )
        else:
            _logger.info("Day %s had no records, nothing archived", archived_day)
        self._reset(current_day)
        _logger.info("Rolled over from %s to %s", archived_day, current_day)

    def _reset(self, current_day: str) -> None:
        self._snapshot = DaySnapshot.empty(
            self.settings_service.default_target, current_day
        )
        self.persistence.save_today(self._snapshot)

    def _commit(self, snapshot: DaySnapshot) -> DayState:
        self._snapshot = snapshot.stamped(self._today())
        self.persistence.save_today(self._snapshot)
        return self.state

    def _today(self) -> str:
        return day_identifier(self.clock.now(), self.tz)
