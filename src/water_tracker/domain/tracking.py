"""Domain models for daily intake tracking."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID, uuid4

from water_tracker.domain.errors import (
    IndexOutOfRangeError,
    InvalidAmountError,
    InvalidTargetError,
)

DEFAULT_TARGET_ML = 2000
DEFAULT_QUICK_AMOUNTS_ML = (100, 200, 350)
DEFAULT_FOCUS_MINUTES = 25


@dataclass(frozen=True)
class DrinkRecord:
    """A single intake entry in millilitres."""

    id: UUID
    timestamp: datetime
    amount: int

    @classmethod
    def create(cls, amount: int, timestamp: datetime) -> "DrinkRecord":
        """Create a record with a fresh id, rejecting non-positive amounts."""
        if amount <= 0:
            raise InvalidAmountError(amount)
        return cls(id=uuid4(), timestamp=timestamp, amount=amount)


@dataclass(frozen=True)
class DaySnapshot:
    """Working state of the current day."""

    target: int
    records: tuple[DrinkRecord, ...]
    last_saved_day_identifier: str

    @classmethod
    def empty(cls, target: int, day_identifier: str) -> "DaySnapshot":
        """Return a snapshot with no records."""
        return cls(target=target, records=(), last_saved_day_identifier=day_identifier)

    @property
    def total(self) -> int:
        """Sum of all record amounts."""
        return sum(record.amount for record in self.records)

    def with_record(self, record: DrinkRecord) -> "DaySnapshot":
        """Return a copy with the record placed first."""
        return replace(self, records=(record, *self.records))

    def without_indices(self, indices: Iterable[int]) -> "DaySnapshot":
        """Return a copy without the records at the given positions.

        Every index is checked before anything is removed, so an invalid
        index leaves no partial deletion behind.
        """
        positions = set(indices)
        invalid = sorted(i for i in positions if not 0 <= i < len(self.records))
        if invalid:
            raise IndexOutOfRangeError(invalid, len(self.records))
        kept = tuple(
            record for i, record in enumerate(self.records) if i not in positions
        )
        return replace(self, records=kept)

    def with_target(self, target: int) -> "DaySnapshot":
        """Return a copy with a new target."""
        if target <= 0:
            raise InvalidTargetError(target)
        return replace(self, target=target)

    def stamped(self, day_identifier: str) -> "DaySnapshot":
        """Return a copy tagged with the day it was saved on."""
        return replace(self, last_saved_day_identifier=day_identifier)


@dataclass(frozen=True)
class DailySummary:
    """Archived totals and records of a finished day."""

    id: UUID
    day_identifier: str
    target: int
    total: int
    records: tuple[DrinkRecord, ...]

    @classmethod
    def from_snapshot(
        cls, snapshot: DaySnapshot, day_identifier: str
    ) -> "DailySummary":
        """Build a summary of the snapshot tagged with the given day."""
        return cls(
            id=uuid4(),
            day_identifier=day_identifier,
            target=snapshot.target,
            total=snapshot.total,
            records=snapshot.records,
        )


@dataclass(frozen=True)
class DayState:
    """Read-only view of the current day handed to the presentation layer."""

    target: int
    total: int
    records: tuple[DrinkRecord, ...]
    day_identifier: str

    @classmethod
    def of(cls, snapshot: DaySnapshot) -> "DayState":
        return cls(
            target=snapshot.target,
            total=snapshot.total,
            records=snapshot.records,
            day_identifier=snapshot.last_saved_day_identifier,
        )

    @property
    def progress(self) -> float:
        """Fraction of the target reached, capped at 1.0."""
        if self.target <= 0:
            return 0.0
        return min(self.total / self.target, 1.0)


@dataclass(frozen=True)
class TrackerSettings:
    """User preferences persisted alongside the tracking data."""

    default_target: int = DEFAULT_TARGET_ML
    quick_amounts: tuple[int, ...] = DEFAULT_QUICK_AMOUNTS_ML
    auto_reset_at_midnight: bool = True
    notifications_enabled: bool = False


@dataclass(frozen=True)
class FocusDay:
    """Focused minutes accumulated on one day."""

    day_identifier: str
    minutes: int = 0
