"""Time sources."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current timezone-aware instant."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        """Return the current UTC instant."""
        return datetime.now(tz=UTC)
