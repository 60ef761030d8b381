# src/quicktask/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the task service, then runs the console
create-task form until the task is saved or the user cancels.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..config import get_settings
from ..connectors.console_connector import run_console_form
from ..core.errors import ConfigError
from ..core.ports import TaskService
from ..logging_setup import setup_logging
from .bootstrap import create_console_screen, create_task_service

logger = logging.getLogger(__name__)


async def _run(service: TaskService) -> bool:
    screen = create_console_screen(service)
    try:
        return await run_console_form(screen.controller, screen.navigator, screen.picker)
    finally:
        aclose = getattr(service, "aclose", None)
        if aclose is not None:
            try:
                await aclose()
            except Exception:
                logger.debug("Task service close failed.", exc_info=True)


def main() -> int:
    settings = get_settings()

    level_name = settings.log_level
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    # keep noisy libs readable
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s (backend=%s)...", settings.app_name, settings.backend)

    try:
        service = create_task_service(settings=settings)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    saved = asyncio.run(_run(service))
    logger.info("Bye (saved=%s).", saved)
    return 0


if __name__ == "__main__":
    sys.exit(main())
