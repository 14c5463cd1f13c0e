"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from water_tracker.domain.tracking import (
    DEFAULT_FOCUS_MINUTES,
    DEFAULT_QUICK_AMOUNTS_ML,
    DEFAULT_TARGET_ML,
    TrackerSettings,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("~/.water_track")
    reference_time_zone: str = "Asia/Seoul"
    default_target: int = DEFAULT_TARGET_ML
    quick_amounts: str = ",".join(str(amount) for amount in DEFAULT_QUICK_AMOUNTS_ML)
    auto_reset_at_midnight: bool = True
    focus_minutes: int = DEFAULT_FOCUS_MINUTES
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="WATER_TRACK_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def tracker_defaults(self) -> TrackerSettings:
        """Return the settings record written on first run."""
        return TrackerSettings(
            default_target=self.default_target,
            quick_amounts=parse_quick_amounts(self.quick_amounts),
            auto_reset_at_midnight=self.auto_reset_at_midnight,
        )


def parse_quick_amounts(raw: str | None) -> tuple[int, ...]:
    """Parse comma-separated quick-add amounts from env."""
    if raw is None:
        return DEFAULT_QUICK_AMOUNTS_ML
    amounts: list[int] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if not value:
            continue
        if value.isdigit() and int(value) > 0:
            amounts.append(int(value))
    return tuple(amounts) or DEFAULT_QUICK_AMOUNTS_ML
