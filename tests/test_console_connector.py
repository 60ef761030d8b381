# tests/test_console_connector.py

from __future__ import annotations

from datetime import date

import pytest

from quicktask.connectors.console_connector import (
    ConsoleDatePicker,
    ConsoleNavigator,
    ConsoleNotifier,
    render_form,
    run_console_form,
)
from quicktask.core.form import FormState, TaskCreationController

from .conftest import NOW, ZONE
from .fakes import FakeTaskService, ScriptedInput, ScriptedPicker


def _screen(service, clock):
    navigator = ConsoleNavigator()
    output: list[str] = []
    controller = TaskCreationController(service, navigator, ConsoleNotifier(write=output.append), clock=clock, tz=ZONE)
    return controller, navigator, output


@pytest.mark.asyncio
async def test_fill_and_save(service: FakeTaskService, clock) -> None:
    controller, navigator, output = _screen(service, clock)
    picker = ScriptedPicker(date(2026, 10, 21))
    read_line = ScriptedInput("t", "Buy milk", "d", " skim ", "p", "s")

    saved = await run_console_form(controller, navigator, picker, read_line=read_line, write=output.append)

    assert saved is True
    assert navigator.left is True
    assert service.requests[0].title == "Buy milk"
    assert service.requests[0].description == "skim"
    assert service.requests[0].due_date == "2026-10-21T12:30:00.000Z"
    # Picker opened with today's default and today as the minimum.
    assert picker.opened_with == [(NOW, NOW.date())]
    assert any("Task saved (id=1)" in line for line in output)


@pytest.mark.asyncio
async def test_validation_error_keeps_form_open(service: FakeTaskService, clock) -> None:
    controller, navigator, output = _screen(service, clock)
    read_line = ScriptedInput("s", "t", "Now titled", "s")

    saved = await run_console_form(controller, navigator, ScriptedPicker(), read_line=read_line, write=output.append)

    assert saved is True
    assert len(service.requests) == 1
    assert any("[Validation] Title is required" in line for line in output)


@pytest.mark.asyncio
async def test_quit_leaves_without_saving(service: FakeTaskService, clock) -> None:
    controller, navigator, output = _screen(service, clock)
    read_line = ScriptedInput("t", "Draft", "x", "q")

    saved = await run_console_form(controller, navigator, ScriptedPicker(), read_line=read_line, write=output.append)

    assert saved is False
    assert service.requests == []
    assert "Unknown command: x" in output


@pytest.mark.asyncio
async def test_eof_leaves_form(service: FakeTaskService, clock) -> None:
    controller, navigator, output = _screen(service, clock)

    saved = await run_console_form(controller, navigator, ScriptedPicker(), read_line=ScriptedInput(), write=output.append)

    assert saved is False
    assert navigator.left is False


def test_date_picker_accepts_default_and_enforces_minimum() -> None:
    output: list[str] = []
    picker = ConsoleDatePicker(read_line=ScriptedInput("2026-13-01", "2026-10-18", "2026-10-22"), write=output.append)

    assert picker.pick(initial=NOW, minimum=NOW.date()) == date(2026, 10, 22)
    assert output == ["Use the YYYY-MM-DD format.", "Pick 2026-10-19 or later."]

    picker = ConsoleDatePicker(read_line=ScriptedInput(""), write=output.append)
    assert picker.pick(initial=NOW, minimum=NOW.date()) == NOW.date()


def test_date_picker_cancel() -> None:
    assert ConsoleDatePicker(read_line=ScriptedInput("c")).pick(initial=NOW, minimum=NOW.date()) is None
    assert ConsoleDatePicker(read_line=ScriptedInput()).pick(initial=NOW, minimum=NOW.date()) is None


def test_render_form_placeholders_and_saving() -> None:
    text = render_form(FormState())
    assert "Set Due Date (optional)" in text
    assert "[s] save" in text

    busy = render_form(FormState(title="Buy milk", due_date=NOW, is_saving=True))
    assert "Buy milk" in busy
    assert "2026-10-19" in busy
    assert "Saving..." in busy
    assert "[s] save" not in busy
