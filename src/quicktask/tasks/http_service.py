# src/quicktask/tasks/http_service.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.errors import SubmissionError
from ..core.form import CreateTaskRequest
from .task_models import Task

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Could not reach the task service"


def _make_timeout(timeout_s: float) -> httpx.Timeout:
    connect_s = min(5.0, timeout_s)
    return httpx.Timeout(connect=connect_s, read=timeout_s, write=timeout_s, pool=connect_s)


def _error_message(response: httpx.Response) -> str:
    """Best-effort human-readable message from an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()

    return f"Server responded with HTTP {response.status_code}"


class HttpTaskService:
    """
    TaskService talking to a REST backend.

    POST {base_url}/tasks with the request payload as JSON. Any timeout
    policy lives here (the form controller imposes none).
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers: dict[str, str] = {"Accept": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._timeout = _make_timeout(float(timeout_seconds))
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def create_task(self, request: CreateTaskRequest) -> Task:
        url = f"{self._base_url}/tasks"
        client = self._get_client()

        try:
            response = await client.post(url, json=request.to_payload(), headers=self._headers)
        except httpx.HTTPError as e:
            logger.info("Task service unreachable url=%s (%s)", url, e.__class__.__name__)
            raise SubmissionError(UNREACHABLE_MESSAGE) from e

        # Redirects are not followed; anything but 2xx is a failure.
        if not response.is_success:
            message = _error_message(response)
            logger.info("Task service rejected request status=%s: %s", response.status_code, message)
            raise SubmissionError(message)

        data: Any
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        task = Task.from_payload(data, fallback=request)
        logger.debug("Task service created id=%s", task.id)
        return task
