"""Pydantic models for persisted records."""

from datetime import datetime
from typing import Annotated, Literal, TypeVar
from uuid import UUID

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from water_tracker.domain.days import parse_day_identifier
from water_tracker.domain.errors import DeserializationError
from water_tracker.domain.tracking import (
    DailySummary,
    DaySnapshot,
    DrinkRecord,
    FocusDay,
    TrackerSettings,
)

SETTINGS_SCHEMA = "water_track.settings/1"
TODAY_SCHEMA = "water_track.today/1"
HISTORY_SCHEMA = "water_track.history/1"
FOCUS_SCHEMA = "focus_timer.today/1"


def _valid_day(value: str) -> str:
    if parse_day_identifier(value) is None:
        raise ValueError(f"not a YYYY-MM-DD day identifier: {value!r}")
    return value


DayIdentifier = Annotated[str, AfterValidator(_valid_day)]


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class SettingsPayload(_Payload):
    """Stored user preferences."""

    schema_tag: Literal["water_track.settings/1"] = Field(
        default=SETTINGS_SCHEMA, alias="schema"
    )
    default_target: int = Field(gt=0, alias="defaultTarget")
    quick_amounts: list[int] = Field(alias="quickAmounts")
    auto_reset_at_midnight: bool = Field(alias="autoResetAtMidnight")
    notifications_enabled: bool = Field(alias="notificationsEnabled")


class DrinkRecordPayload(_Payload):
    """Stored intake record."""

    id: UUID
    timestamp: datetime
    amount: int = Field(gt=0)


class TodayPayload(_Payload):
    """Stored working state of the current day."""

    schema_tag: Literal["water_track.today/1"] = Field(
        default=TODAY_SCHEMA, alias="schema"
    )
    target: int = Field(gt=0)
    records: list[DrinkRecordPayload]
    last_saved_day_identifier: DayIdentifier = Field(alias="lastSavedDayIdentifier")


class DailySummaryPayload(_Payload):
    """Stored archived day."""

    id: UUID
    day_identifier: DayIdentifier = Field(alias="dayIdentifier")
    target: int
    total: int
    records: list[DrinkRecordPayload]

    @model_validator(mode="after")
    def check_total_matches_records(self) -> "DailySummaryPayload":
        recorded = sum(record.amount for record in self.records)
        if self.total != recorded:
            raise ValueError(f"total {self.total} != sum of records {recorded}")
        return self


class HistoryPayload(_Payload):
    """Stored history list, newest first."""

    schema_tag: Literal["water_track.history/1"] = Field(
        default=HISTORY_SCHEMA, alias="schema"
    )
    days: list[DailySummaryPayload]


class FocusDayPayload(_Payload):
    """Stored focus tally."""

    schema_tag: Literal["focus_timer.today/1"] = Field(
        default=FOCUS_SCHEMA, alias="schema"
    )
    day_identifier: DayIdentifier = Field(alias="dayIdentifier")
    minutes: int = Field(ge=0)


_P = TypeVar("_P", bound=_Payload)


def _dump(payload: _Payload) -> str:
    return payload.model_dump_json(by_alias=True)


def _load(model: type[_P], key: str, raw: str) -> _P:
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        reason = f"{exc.error_count()} validation errors"
        raise DeserializationError(key, reason) from exc


def _record_payload(record: DrinkRecord) -> DrinkRecordPayload:
    return DrinkRecordPayload(
        id=record.id, timestamp=record.timestamp, amount=record.amount
    )


def _record(payload: DrinkRecordPayload) -> DrinkRecord:
    return DrinkRecord(
        id=payload.id, timestamp=payload.timestamp, amount=payload.amount
    )


def encode_settings(settings: TrackerSettings) -> str:
    """Serialize settings to JSON."""
    return _dump(
        SettingsPayload(
            default_target=settings.default_target,
            quick_amounts=list(settings.quick_amounts),
            auto_reset_at_midnight=settings.auto_reset_at_midnight,
            notifications_enabled=settings.notifications_enabled,
        )
    )


def decode_settings(key: str, raw: str) -> TrackerSettings:
    """Deserialize settings, raising DeserializationError on bad data."""
    payload = _load(SettingsPayload, key, raw)
    return TrackerSettings(
        default_target=payload.default_target,
        quick_amounts=tuple(payload.quick_amounts),
        auto_reset_at_midnight=payload.auto_reset_at_midnight,
        notifications_enabled=payload.notifications_enabled,
    )


def encode_today(snapshot: DaySnapshot) -> str:
    """Serialize the current-day snapshot to JSON."""
    return _dump(
        TodayPayload(
            target=snapshot.target,
            records=[_record_payload(record) for record in snapshot.records],
            last_saved_day_identifier=snapshot.last_saved_day_identifier,
        )
    )


def decode_today(key: str, raw: str) -> DaySnapshot:
    """Deserialize the current-day snapshot."""
    payload = _load(TodayPayload, key, raw)
    return DaySnapshot(
        target=payload.target,
        records=tuple(_record(record) for record in payload.records),
        last_saved_day_identifier=payload.last_saved_day_identifier,
    )


def encode_history(history: tuple[DailySummary, ...]) -> str:
    """Serialize the history list to JSON, preserving order."""
    return _dump(
        HistoryPayload(
            days=[
                DailySummaryPayload(
                    id=summary.id,
                    day_identifier=summary.day_identifier,
                    target=summary.target,
                    total=summary.total,
                    records=[_record_payload(record) for record in summary.records],
                )
                for summary in history
            ]
        )
    )


def decode_history(key: str, raw: str) -> tuple[DailySummary, ...]:
    """Deserialize the history list."""
    payload = _load(HistoryPayload, key, raw)
    return tuple(
        DailySummary(
            id=day.id,
            day_identifier=day.day_identifier,
            target=day.target,
            total=day.total,
            records=tuple(_record(record) for record in day.records),
        )
        for day in payload.days
    )


def encode_focus_day(focus_day: FocusDay) -> str:
    """Serialize the focus tally to JSON."""
    return _dump(
        FocusDayPayload(
            day_identifier=focus_day.day_identifier, minutes=focus_day.minutes
        )
    )


def decode_focus_day(key: str, raw: str) -> FocusDay:
    """Deserialize the focus tally."""
    payload = _load(FocusDayPayload, key, raw)
    return FocusDay(day_identifier=payload.day_identifier, minutes=payload.minutes)
