"""Daily reminder scheduler."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from pingbot.errors import InputError
from pingbot.models import ScheduleConfig, TickOutcome
from pingbot.names import build_reminder_text
from pingbot.pinger import Pinger

LOGGER = logging.getLogger(__name__)

# Fixed English names; calendar.day_name follows the process locale.
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DailyScheduler:
    """Fires the reminder at most once per eligible day.

    ``fired_today`` is the only state. It is set after the reminder is
    attempted at the target minute, whatever the outcome, and cleared once
    local time reaches ``reset_hour``. Excluded days skip the whole tick, so a
    reset that falls on an excluded day waits for the next eligible day.
    """

    def __init__(
        self,
        pinger: Pinger,
        schedule: ScheduleConfig,
        names_loader: Callable[[], list[str]],
        clock: Callable[[], datetime] = utc_now,
        tick_interval_seconds: float = 30.0,
    ) -> None:
        self._pinger = pinger
        self._schedule = schedule
        self._names_loader = names_loader
        self._clock = clock
        self._tick_interval_seconds = tick_interval_seconds
        self._stop_event = asyncio.Event()
        self.fired_today = False

    async def tick(self, now: datetime | None = None) -> TickOutcome:
        """Evaluate the schedule once against ``now`` (defaults to the clock)."""

        local_now = (now or self._clock()).astimezone(self._schedule.timezone)
        if WEEKDAY_NAMES[local_now.weekday()] in self._schedule.excluded_days:
            return TickOutcome.EXCLUDED_DAY

        at_target = (
            local_now.hour == self._schedule.target_hour
            and local_now.minute == self._schedule.target_minute
        )
        if at_target and not self.fired_today:
            try:
                names = self._names_loader()
            except InputError as exc:
                LOGGER.error("%s", exc)
                return TickOutcome.ABANDONED

            try:
                result = await self._pinger.post_reminder(build_reminder_text(names))
            finally:
                self.fired_today = True
            if not result.delivered:
                LOGGER.warning("Today's reminder was not delivered: %s", result.error)
            return TickOutcome.FIRED

        # No reset during the target minute, so reset_hour == target_hour fires once.
        if local_now.hour == self._schedule.reset_hour and self.fired_today and not at_target:
            LOGGER.info("Resetting daily ping flag at %s", local_now.isoformat())
            self.fired_today = False
            return TickOutcome.RESET

        return TickOutcome.WAITING

    async def run_forever(self) -> None:
        """Run scheduler loop until stop() is called."""

        LOGGER.info(
            "Scheduler started: ping at %02d:%02d %s, skipping %s",
            self._schedule.target_hour,
            self._schedule.target_minute,
            self._schedule.timezone.key,
            ", ".join(sorted(self._schedule.excluded_days)) or "no days",
        )
        while not self._stop_event.is_set():
            try:
                await self.tick()
            except Exception:  # noqa: BLE001
                LOGGER.exception("Scheduler tick failed")
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._tick_interval_seconds)
            except asyncio.TimeoutError:
                pass
        LOGGER.info("Scheduler stopped")

    def stop(self) -> None:
        """Signal the loop to stop after the current tick."""

        self._stop_event.set()
