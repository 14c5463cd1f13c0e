"""Daily tally of completed focus sessions."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from zoneinfo import ZoneInfo

from water_tracker.domain.days import day_identifier
from water_tracker.domain.errors import InvalidAmountError
from water_tracker.domain.tracking import DEFAULT_FOCUS_MINUTES, FocusDay
from water_tracker.services.clock import Clock
from water_tracker.services.persistence import StatePersistence

_logger = logging.getLogger(__name__)


@dataclass
class FocusTally:
    """Focused minutes for the current day, starting from zero each day."""

    persistence: StatePersistence
    clock: Clock
    tz: ZoneInfo
    session_minutes: int = DEFAULT_FOCUS_MINUTES

    def today_minutes(self, now: datetime | None = None) -> int:
        """Return minutes focused today."""
        return self._current(now).minutes

    def record_focus_session(
        self, minutes: int | None = None, now: datetime | None = None
    ) -> int:
        """Add a completed focus block and return today's new total."""
        length = self.session_minutes if minutes is None else minutes
        if length <= 0:
            raise InvalidAmountError(length)
        current = self._current(now)
        updated = replace(current, minutes=current.minutes + length)
        self.persistence.save_focus_day(updated)
        return updated.minutes

    def _current(self, now: datetime | None) -> FocusDay:
        today = day_identifier(now or self.clock.now(), self.tz)
        stored = self.persistence.load_focus_day().value_or(None)
        if stored is not None and stored.day_identifier == today:
            return stored
        if stored is not None:
            _logger.info(
                "Focus tally reset for %s (was %s minutes on %s)",
                today,
                stored.minutes,
                stored.day_identifier,
            )
        fresh = FocusDay(day_identifier=today)
        self.persistence.save_focus_day(fresh)
        return fresh
