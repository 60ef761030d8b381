# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import date, datetime

from quicktask.core.form import CreateTaskRequest
from quicktask.tasks.task_models import Task


class FakeTaskService:
    """
    In-memory TaskService for controller tests.

    - Records every request for assertions
    - Fails with `error` when set
    - Holds the call open until `release` is set when `gate` is enabled
    """

    def __init__(self, *, error: Exception | None = None, gate: bool = False) -> None:
        self.requests: list[CreateTaskRequest] = []
        self.error = error
        self.release: asyncio.Event | None = asyncio.Event() if gate else None
        self.started: asyncio.Event = asyncio.Event()

    async def create_task(self, request: CreateTaskRequest) -> Task:
        self.requests.append(request)
        self.started.set()
        if self.release is not None:
            await self.release.wait()
        if self.error is not None:
            raise self.error
        return Task(
            id=len(self.requests),
            title=request.title,
            description=request.description,
            due_date=request.due_date,
        )


@dataclass(slots=True)
class FakeNavigator:
    back_calls: int = 0
    error: Exception | None = None

    def go_back(self) -> None:
        self.back_calls += 1
        if self.error is not None:
            raise self.error


@dataclass(slots=True)
class Alert:
    title: str
    message: str


@dataclass(slots=True)
class FakeNotifier:
    alerts: list[Alert] = field(default_factory=list)

    def alert(self, title: str, message: str) -> None:
        self.alerts.append(Alert(title=title, message=message))


class FixedClock:
    """Callable clock returning a settable aware datetime."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class ScriptedPicker:
    """DatePicker returning predefined answers and recording how it was opened."""

    def __init__(self, *answers: date | None) -> None:
        self.answers = list(answers)
        self.opened_with: list[tuple[datetime, date]] = []

    def pick(self, *, initial: datetime, minimum: date) -> date | None:
        self.opened_with.append((initial, minimum))
        return self.answers.pop(0)


class ScriptedInput:
    """read_line replacement: pops scripted lines, raises EOFError when exhausted."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)
