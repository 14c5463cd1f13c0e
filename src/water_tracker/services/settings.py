"""User settings service."""

import logging
from dataclasses import dataclass, field, replace

from water_tracker.domain.errors import InvalidAmountError, InvalidTargetError
from water_tracker.domain.tracking import TrackerSettings
from water_tracker.services.persistence import LoadStatus, StatePersistence

_logger = logging.getLogger(__name__)


@dataclass
class SettingsService:
    """Loads, initializes and updates the persisted settings record."""

    persistence: StatePersistence
    defaults: TrackerSettings = field(default_factory=TrackerSettings)
    _current: TrackerSettings | None = field(default=None, init=False, repr=False)

    def load(self) -> TrackerSettings:
        """Return stored settings, writing defaults when none are usable."""
        if self._current is not None:
            return self._current
        result = self.persistence.load_settings()
        if result.status is LoadStatus.PRESENT and result.value is not None:
            self._current = result.value
            return self._current
        if result.status is LoadStatus.CORRUPT:
            _logger.warning("Settings unreadable, restoring defaults")
        self._save(self.defaults)
        return self.defaults

    def reload(self) -> TrackerSettings:
        """Drop the cached value and read the settings again."""
        self._current = None
        return self.load()

    @property
    def default_target(self) -> int:
        return self.load().default_target

    @property
    def auto_reset_at_midnight(self) -> bool:
        return self.load().auto_reset_at_midnight

    @property
    def quick_amounts(self) -> tuple[int, ...]:
        return self.load().quick_amounts

    def set_default_target(self, target: int) -> TrackerSettings:
        """Persist a new default target for future days."""
        if target <= 0:
            raise InvalidTargetError(target)
        return self._save(replace(self.load(), default_target=target))

    def set_auto_reset(self, enabled: bool) -> TrackerSettings:
        """Toggle the automatic reset at midnight."""
        return self._save(replace(self.load(), auto_reset_at_midnight=enabled))

    def set_notifications_enabled(self, enabled: bool) -> TrackerSettings:
        """Toggle the notifications preference."""
        return self._save(replace(self.load(), notifications_enabled=enabled))

    def set_quick_amounts(self, amounts: list[int]) -> TrackerSettings:
        """Replace the quick-add amounts, keeping their order."""
        for amount in amounts:
            if amount <= 0:
                raise InvalidAmountError(amount)
        return self._save(replace(self.load(), quick_amounts=tuple(amounts)))

    def _save(self, settings: TrackerSettings) -> TrackerSettings:
        self.persistence.save_settings(settings)
        self._current = settings
        return settings
