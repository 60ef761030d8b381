# src/quicktask/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the form controller.

The controller depends on Protocols instead of concrete implementations.
This keeps task backends and UI connectors swappable and makes testing easier.
"""

from datetime import date, datetime
from typing import TYPE_CHECKING, Awaitable, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task
    from .form import CreateTaskRequest, FormState


class TaskService(Protocol):
    """
    Persists a new task.

    Fails (SubmissionError or any other exception) with a human-readable message.
    No retries are expected from callers: one call per user-initiated submit.
    """

    def create_task(self, request: CreateTaskRequest) -> Awaitable[Task]: ...


class Navigator(Protocol):
    """Screen transitions. go_back() unwinds the current screen."""

    def go_back(self) -> None: ...


class Notifier(Protocol):
    """Blocking user-facing notification (alert dialog, console banner, ...)."""

    def alert(self, title: str, message: str) -> None: ...


class DatePicker(Protocol):
    """
    Modal date selection widget.

    Returns the picked day, or None when the user cancels.
    Days before `minimum` must not be selectable.
    """

    def pick(self, *, initial: datetime, minimum: date) -> date | None: ...


class StateListener(Protocol):
    """Rendering-side observer; called after every FormState change."""

    def __call__(self, state: FormState) -> None: ...
