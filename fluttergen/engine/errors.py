"""Exceptions raised by the resolution engine."""

from __future__ import annotations


class FluttergenError(Exception):
    """Base class for every error raised by fluttergen."""


class InvalidConfig(FluttergenError):
    """Raised when the raw project configuration cannot be accepted.

    Always fatal: the run stops before anything touches the file system.
    """

    def __init__(self, reason: str, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        message = f"Invalid configuration: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class PlanCollision(FluttergenError):
    """Raised when two plan entries target the same file with different content."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Plan collision: '{path}' is already registered with different content")
