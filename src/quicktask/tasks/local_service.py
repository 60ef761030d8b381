# src/quicktask/tasks/local_service.py

from __future__ import annotations

import asyncio
import logging
import sqlite3

from ..core.errors import SubmissionError
from ..core.form import CreateTaskRequest
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class LocalTaskService:
    """
    TaskService backed by the local SQLite TaskStore.

    SQLite calls are blocking, so they run in a worker thread to keep the
    event loop responsive while the form waits.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def create_task(self, request: CreateTaskRequest) -> Task:
        return await asyncio.to_thread(self._create_sync, request)

    def _create_sync(self, request: CreateTaskRequest) -> Task:
        try:
            task_id = self._store.add_task(
                title=request.title,
                description=request.description,
                due_date=request.due_date,
            )
            task = self._store.get_task(task_id)
        except sqlite3.Error as e:
            logger.exception("TaskStore write failed db=%s", self._store.db_path)
            raise SubmissionError("Failed to save task") from e

        if task is None:
            raise SubmissionError("Failed to save task")
        return task
