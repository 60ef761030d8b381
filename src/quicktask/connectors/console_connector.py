# src/quicktask/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from ..core.errors import ValidationError
from ..core.form import FormState, TaskCreationController
from ..core.ports import DatePicker

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

MENU = "[t] title  [d] description  [p] due date  [s] save  [q] cancel"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNavigator:
    """Leaving the form screen just ends the console loop."""

    def __init__(self) -> None:
        self.left = False

    def go_back(self) -> None:
        self.left = True


class ConsoleNotifier:
    def __init__(self, write: Write = print) -> None:
        self._write = write

    def alert(self, title: str, message: str) -> None:
        self._write(f"[{_ts_local()}] [{title}] {message}")


class ConsoleDatePicker:
    """
    Line-based date picker.

    Enter accepts the initial day, "c" cancels, anything else must be
    YYYY-MM-DD on or after the minimum day.
    """

    def __init__(self, read_line: ReadLine = input, write: Write = print) -> None:
        self._read_line = read_line
        self._write = write

    def pick(self, *, initial: datetime, minimum: date) -> date | None:
        default = initial.date()
        while True:
            try:
                raw = self._read_line(f"Due date YYYY-MM-DD [{default.isoformat()}], c to cancel: ").strip()
            except EOFError:
                return None

            if not raw:
                return default
            if raw.lower() == "c":
                return None

            try:
                picked = date.fromisoformat(raw)
            except ValueError:
                self._write("Use the YYYY-MM-DD format.")
                continue

            if picked < minimum:
                self._write(f"Pick {minimum.isoformat()} or later.")
                continue
            return picked


def render_form(state: FormState) -> str:
    due = state.due_date.date().isoformat() if state.due_date is not None else "Set Due Date (optional)"
    lines = [
        "Create Task",
        f"  Title:       {state.title or '-'}",
        f"  Description: {state.description or 'Description (optional)'}",
        f"  Due date:    {due}",
        "  Saving..." if state.is_saving else f"  {MENU}",
    ]
    return "\n".join(lines)


async def run_console_form(
    controller: TaskCreationController,
    navigator: ConsoleNavigator,
    picker: DatePicker,
    *,
    read_line: ReadLine = input,
    write: Write = print,
) -> bool:
    """
    Drive one create-task screen from the console.

    Returns True when a task was saved, False when the user left without saving.
    """
    logger.info("Console form started.")
    saved = False

    while not navigator.left:
        write(render_form(controller.state))
        try:
            cmd = read_line("> ").strip().lower()

            if cmd == "t":
                controller.set_title(read_line("Title: "))
            elif cmd == "d":
                controller.set_description(read_line("Description: "))
            elif cmd == "p":
                controller.open_date_picker()
                picked = picker.pick(initial=controller.picker_initial, minimum=controller.picker_minimum)
                controller.on_date_picked(picked)
            elif cmd == "s":
                try:
                    task = await controller.submit()
                except ValidationError:
                    continue
                if task is not None:
                    saved = True
                    write(f"[{_ts_local()}] Task saved (id={task.id}).")
            elif cmd in ("q", "/exit", "/quit"):
                logger.info("Console form cancelled by user.")
                break
            elif cmd:
                write(f"Unknown command: {cmd}")
        except EOFError:
            logger.info("Console EOF received, leaving form.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, leaving form.")
            write("")
            break

    logger.info("Console form finished (saved=%s).", saved)
    return saved
