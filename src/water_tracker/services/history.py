"""Archive of finished days."""

import logging
from dataclasses import dataclass, field

from water_tracker.domain.tracking import DailySummary
from water_tracker.services.persistence import LoadStatus, StatePersistence

_logger = logging.getLogger(__name__)


@dataclass
class HistoryStore:
    """Append-only list of daily summaries, newest first."""

    persistence: StatePersistence
    _entries: tuple[DailySummary, ...] | None = field(
        default=None, init=False, repr=False
    )

    def all(self) -> tuple[DailySummary, ...]:
        """Return every archived day, newest first."""
        return self._loaded()

    def archive(self, summary: DailySummary) -> None:
        """Prepend a summary and persist the whole list."""
        entries = (summary, *self._loaded())
        self.persistence.save_history(entries)
        self._entries = entries
        _logger.info(
            "Archived day %s: total=%s target=%s records=%s",
            summary.day_identifier,
            summary.total,
            summary.target,
            len(summary.records),
        )

    def _loaded(self) -> tuple[DailySummary, ...]:
        if self._entries is None:
            result = self.persistence.load_history()
            if result.status is LoadStatus.CORRUPT:
                _logger.warning("History unreadable, starting with an empty list")
            self._entries = result.value_or(())
        return self._entries
