"""Dependency container wiring for the application."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from zoneinfo import ZoneInfo

from water_tracker.adapters.json_file_store import JsonFileKeyValueStore
from water_tracker.app_logging import configure_logging
from water_tracker.config import Settings
from water_tracker.services.clock import Clock, SystemClock
from water_tracker.services.day_tracker import DayTracker
from water_tracker.services.focus import FocusTally
from water_tracker.services.history import HistoryStore
from water_tracker.services.persistence import StatePersistence
from water_tracker.services.settings import SettingsService
from water_tracker.services.storage import KeyValueStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    clock: Clock
    persistence: StatePersistence
    settings_service: SettingsService
    history_store: HistoryStore
    day_tracker: DayTracker
    focus_tally: FocusTally
    close_resources: Callable[[], None]


def build_container(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    resolved_store = store or JsonFileKeyValueStore.create(resolved_settings.data_dir)
    resolved_clock = clock or SystemClock()
    tz = ZoneInfo(resolved_settings.reference_time_zone)

    persistence = StatePersistence(resolved_store)
    settings_service = SettingsService(
        persistence, defaults=resolved_settings.tracker_defaults()
    )
    history_store = HistoryStore(persistence)
    day_tracker = DayTracker(
        persistence=persistence,
        history_store=history_store,
        settings_service=settings_service,
        clock=resolved_clock,
        tz=tz,
    )
    focus_tally = FocusTally(
        persistence=persistence,
        clock=resolved_clock,
        tz=tz,
        session_minutes=resolved_settings.focus_minutes,
    )

    def close_resources() -> None:
        logging.getLogger(__name__).info("Closing tracker for %s", resolved_store)

    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        clock=resolved_clock,
        persistence=persistence,
        settings_service=settings_service,
        history_store=history_store,
        day_tracker=day_tracker,
        focus_tally=focus_tally,
        close_resources=close_resources,
    )
