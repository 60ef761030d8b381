# src/quicktask/core/errors.py

from __future__ import annotations


class QuickTaskError(Exception):
    """Base class for errors raised by quicktask."""


class ValidationError(QuickTaskError):
    """
    Form input rejected before anything is sent to the task service.

    str(exc) is the short reason ("title required", "date in the past");
    exc.message is the text shown to the user.
    """

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.message = message or reason


class SubmissionError(QuickTaskError):
    """The task service rejected the request or could not be reached."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ConfigError(QuickTaskError):
    """Settings that cannot be wired into a working application."""
