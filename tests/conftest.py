# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace
from zoneinfo import ZoneInfo

import pytest

from quicktask.core.form import TaskCreationController

from .fakes import FakeNavigator, FakeNotifier, FakeTaskService, FixedClock

# Mid-afternoon in a zone east of UTC, so day boundaries differ between local and UTC.
ZONE = ZoneInfo("Europe/Istanbul")
NOW = datetime(2026, 10, 19, 15, 30, tzinfo=ZONE)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def service() -> FakeTaskService:
    return FakeTaskService()


@pytest.fixture()
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def controller(
    service: FakeTaskService,
    navigator: FakeNavigator,
    notifier: FakeNotifier,
    clock: FixedClock,
) -> TaskCreationController:
    return TaskCreationController(service, navigator, notifier, clock=clock, tz=ZONE)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    A SimpleNamespace rather than real config keeps unit tests isolated
    from the process environment.
    """
    return SimpleNamespace(
        app_name="quicktask",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
        backend="local",
        api_base_url="",
        api_token=None,
        api_timeout_seconds=5.0,
    )
