"""Injectable progress reporting.

Every engine component that has something to say takes a ``Reporter``
instead of printing.  The base class only records messages, which keeps the
engine testable without capturing console output; ``ConsoleReporter`` also
renders them with Rich for the command-line front end.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console


INFO = "info"
SUCCESS = "success"
WARNING = "warning"
ERROR = "error"

_STYLES: dict[str, str] = {
    INFO: "dim",
    SUCCESS: "bold green",
    WARNING: "bold yellow",
    ERROR: "bold red",
}


class Reporter:
    """Collects ``(level, message)`` records emitted during a run."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._emit(INFO, message)

    def success(self, message: str) -> None:
        self._emit(SUCCESS, message)

    def warning(self, message: str) -> None:
        self._emit(WARNING, message)

    def error(self, message: str) -> None:
        self._emit(ERROR, message)

    def messages(self, level: Optional[str] = None) -> list[str]:
        """Return recorded messages, optionally filtered by *level*."""
        return [msg for lvl, msg in self.records if level is None or lvl == level]

    def _emit(self, level: str, message: str) -> None:
        self.records.append((level, message))


class ConsoleReporter(Reporter):
    """Reporter that also prints each record to a Rich console.

    ``info`` records are only printed when *verbose* is set; they are
    always recorded.
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbose = verbose

    def _emit(self, level: str, message: str) -> None:
        super()._emit(level, message)
        if level == INFO and not self.verbose:
            return
        style = _STYLES.get(level, "")
        self.console.print(f"[{style}]{message}[/{style}]")
