# src/quicktask/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- picks the TaskService implementation from settings,
- wires the console connector to a fresh TaskCreationController.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import BACKENDS, Settings, get_settings
from ..connectors.console_connector import ConsoleDatePicker, ConsoleNavigator, ConsoleNotifier
from ..core.errors import ConfigError
from ..core.form import TaskCreationController
from ..core.ports import TaskService
from ..tasks.http_service import HttpTaskService
from ..tasks.local_service import LocalTaskService
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class ConsoleScreen:
    """Everything one console create-task screen needs."""

    controller: TaskCreationController
    navigator: ConsoleNavigator
    picker: ConsoleDatePicker


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_task_service(*, settings: Settings | None = None) -> TaskService:
    """
    Build the TaskService selected by settings.backend.

    Keeping settings injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    backend = settings.backend
    if backend not in BACKENDS:
        raise ConfigError(f"Unknown task backend {backend!r}; expected one of {', '.join(BACKENDS)}")

    if backend == "http":
        if not settings.api_base_url:
            raise ConfigError("QUICKTASK_API_BASE_URL is required for the http backend")
        logger.info("Using HTTP task service at %s", settings.api_base_url)
        return HttpTaskService(
            settings.api_base_url,
            token=settings.api_token,
            timeout_seconds=settings.api_timeout_seconds,
        )

    _ensure_local_dirs(settings)
    logger.info("Using local task store at %s", settings.tasks_db_path)
    return LocalTaskService(TaskStore(settings.tasks_db_path))


def create_console_screen(service: TaskService) -> ConsoleScreen:
    """Fresh form state for every screen instance."""
    navigator = ConsoleNavigator()
    controller = TaskCreationController(service, navigator, ConsoleNotifier())
    return ConsoleScreen(controller=controller, navigator=navigator, picker=ConsoleDatePicker())
