# src/quicktask/core/form.py

"""
Create-task form controller.

Holds the transient form state for one screen instance, validates it on
submit and hands a CreateTaskRequest to the task service.

States: idle <-> submitting, tracked by FormState.is_saving.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from typing import TYPE_CHECKING, Any

from .errors import ValidationError
from .ports import Navigator, Notifier, StateListener, TaskService

if TYPE_CHECKING:
    from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

FAILURE_FALLBACK_MESSAGE = "Failed to create task"


def local_now() -> datetime:
    return datetime.now().astimezone()


def to_timestamp(value: datetime) -> str:
    """Absolute ISO 8601 timestamp in UTC with millisecond precision ("...Z")."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class FormState:
    title: str = ""
    description: str = ""
    # Represents a day; the time component carries no meaning.
    due_date: datetime | None = None
    is_date_picker_visible: bool = False
    is_saving: bool = False


@dataclass(slots=True, frozen=True)
class CreateTaskRequest:
    """Validated payload for TaskService.create_task()."""

    title: str
    description: str
    due_date: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": self.title, "description": self.description}
        if self.due_date is not None:
            payload["dueDate"] = self.due_date
        return payload


class TaskCreationController:
    """
    Owns FormState for a single create-task screen.

    Field setters never validate; all rules run in submit(). Validation
    failures are alerted and raised as ValidationError. Service failures are
    alerted and swallowed so the user can retry with the same form contents.
    """

    def __init__(
        self,
        service: TaskService,
        navigator: Navigator,
        notifier: Notifier,
        *,
        clock: Callable[[], datetime] = local_now,
        tz: tzinfo | None = None,
    ) -> None:
        self._service = service
        self._navigator = navigator
        self._notifier = notifier
        self._clock = clock
        # None means the system zone, with its daylight-saving rules.
        self._tz = tz
        self._listeners: list[StateListener] = []
        self.state = FormState()

    # ---- observers ----

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # ---- field updates ----

    def set_title(self, text: str) -> None:
        self.state.title = text
        self._changed()

    def set_description(self, text: str) -> None:
        self.state.description = text
        self._changed()

    # ---- date picker ----

    def open_date_picker(self) -> None:
        self.state.is_date_picker_visible = True
        if self.state.due_date is None:
            # The picker never opens empty: default to today, once.
            self.state.due_date = self._clock()
        self._changed()

    def on_date_picked(self, picked: date | datetime | None) -> None:
        """Close the picker. None means the pick was cancelled."""
        self.state.is_date_picker_visible = False
        if picked is not None:
            self.state.due_date = self._as_datetime(picked)
        self._changed()

    @property
    def picker_initial(self) -> datetime:
        return self.state.due_date or self._clock()

    @property
    def picker_minimum(self) -> date:
        return self._local_day(self._clock())

    def _localize(self, naive: datetime) -> datetime:
        """Attach the zone offset in force on that day, not today's."""
        if self._tz is None:
            return naive.astimezone()
        return naive.replace(tzinfo=self._tz)

    def _local_day(self, value: datetime) -> date:
        return value.astimezone(self._tz).date()

    def _as_datetime(self, value: date | datetime) -> datetime:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return self._localize(value)
            return value
        # A bare day keeps the current time of day, like the platform picker.
        now = self._clock().astimezone(self._tz)
        return self._localize(datetime.combine(value, now.time()))

    # ---- submit ----

    def validate(self) -> CreateTaskRequest:
        """Run the form rules and build the request. Raises ValidationError."""
        title = self.state.title.strip()
        if not title:
            raise ValidationError("title required", "Title is required")

        due = self.state.due_date
        if due is not None:
            if self._local_day(due) < self._local_day(self._clock()):
                raise ValidationError("date in the past", "Due date cannot be in the past")

        return CreateTaskRequest(
            title=title,
            description=self.state.description.strip(),
            due_date=to_timestamp(due) if due is not None else None,
        )

    async def submit(self) -> Task | None:
        """
        Validate and send the form.

        Returns the created task, or None when the attempt failed (already
        alerted) or a submission is still in flight.
        """
        if self.state.is_saving:
            logger.debug("submit ignored: a request is already in flight")
            return None

        try:
            request = self.validate()
        except ValidationError as e:
            logger.info("Form rejected: %s", e.reason)
            self._notifier.alert("Validation", e.message)
            raise

        self.state.is_saving = True
        self._changed()
        try:
            task = await self._service.create_task(request)
            logger.info("Task created id=%s title=%r", getattr(task, "id", None), request.title)
            self._navigator.go_back()
            return task
        except Exception as e:
            message = str(e) or FAILURE_FALLBACK_MESSAGE
            logger.warning("Task creation failed: %s", message, exc_info=True)
            self._notifier.alert("Error", message)
            return None
        finally:
            self.state.is_saving = False
            self._changed()
