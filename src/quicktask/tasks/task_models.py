# src/quicktask/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..core.form import CreateTaskRequest


class TaskStatus(StrEnum):
    """Task lifecycle status as reported by a task service."""

    PENDING = "pending"
    DONE = "done"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


@dataclass(slots=True)
class Task:
    id: int | str
    title: str
    description: str
    due_date: str | None
    status: TaskStatus = TaskStatus.PENDING
    created_at: float | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any], *, fallback: CreateTaskRequest | None = None) -> Task:
        """
        Build a Task from a service response body.

        Fields the server omitted are taken from `fallback` (the request).
        """
        def pick(key: str, attr: str, default: Any = None) -> Any:
            if key in data and data[key] is not None:
                return data[key]
            return getattr(fallback, attr, default)

        created = data.get("createdAt")
        return cls(
            id=data.get("id", ""),
            title=str(pick("title", "title", "")),
            description=str(pick("description", "description", "")),
            due_date=pick("dueDate", "due_date"),
            status=TaskStatus.from_db(data.get("status")),
            created_at=created if isinstance(created, (int, float)) else None,
        )
