"""Application entrypoint."""

from __future__ import annotations

import asyncio
import functools
import logging
import signal

from pingbot.config import load_settings
from pingbot.errors import ConfigError
from pingbot.names import load_names
from pingbot.pinger import Pinger
from pingbot.scheduler import DailyScheduler
from pingbot.telegram.client import TelegramClient

LOGGER = logging.getLogger(__name__)


async def run() -> None:
    """Initialize app layers and run the scheduler until signalled."""

    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)

    client = TelegramClient(
        token=settings.token,
        webhook_url=settings.webhook_url,
        api_base=settings.telegram_api_base,
        timeout_seconds=settings.request_timeout_seconds,
    )
    scheduler = DailyScheduler(
        pinger=Pinger(client),
        schedule=settings.schedule(),
        names_loader=functools.partial(load_names, settings.names_file),
        tick_interval_seconds=settings.tick_interval_seconds,
    )

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, scheduler.stop)
        except NotImplementedError:
            # Windows event loops have no signal handler support.
            pass

    await scheduler.run_forever()
    LOGGER.info("Ping bot shutdown complete")


def main() -> None:
    """Synchronous wrapper for asyncio entrypoint."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        asyncio.run(run())
    except ConfigError as exc:
        LOGGER.critical("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
