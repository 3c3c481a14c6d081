"""Core domain models used across layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from zoneinfo import ZoneInfo


@dataclass(frozen=True, slots=True)
class ScheduleConfig:
    """When the daily reminder fires, in local time of ``timezone``."""

    target_hour: int
    target_minute: int
    reset_hour: int
    excluded_days: frozenset[str]
    timezone: ZoneInfo


@dataclass(slots=True)
class PingResult:
    """Outcome of one reminder attempt."""

    delivered: bool
    chat_id: int | None = None
    error: str | None = None


class TickOutcome(str, Enum):
    """What a single scheduler tick did."""

    EXCLUDED_DAY = "excluded_day"
    FIRED = "fired"
    ABANDONED = "abandoned"
    RESET = "reset"
    WAITING = "waiting"
