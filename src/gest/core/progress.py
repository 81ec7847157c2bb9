"""User-facing progress feedback while the event stream is consumed.

Design principles:
- Single line on stderr, erased once the stream ends
- Graceful degradation in non-TTY (CI, pipes): nothing is drawn
- Suppress structlog console output while the line is live

Usage::

    from gest.core.progress import ProgressIndicator

    with ProgressIndicator(width=20) as indicator:
        aggregator = consume(sys.stdin, on_progress=indicator.update)
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from types import TracebackType
from typing import TYPE_CHECKING

from rich.console import Console
from rich.progress import BarColumn, Progress, TaskID, TextColumn

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

# Console for progress output
_console = Console(stderr=True)

# Flag to suppress console logging while the progress line is live
_suppress_console_logs = threading.local()


def is_console_suppressed() -> bool:
    """Check if console logging is currently suppressed."""
    return getattr(_suppress_console_logs, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Context manager to suppress structlog console output.

    Keeps log lines from colliding with the live progress line.
    Logs are still written to file handlers.
    """
    _suppress_console_logs.active = True
    try:
        yield
    finally:
        _suppress_console_logs.active = False


def _get_logger() -> BoundLogger:
    """Get logger lazily to respect runtime config."""
    from gest.core.logging import get_logger

    return get_logger("progress")


def get_console() -> Console:
    """Get the shared stderr console instance."""
    return _console


class ProgressIndicator:
    """Running count of processed tests with an indeterminate bar.

    ``update`` matches the aggregator's ``on_progress`` callback. The bar is
    refreshed only from ``update`` so no background refresh thread is used.
    """

    def __init__(
        self,
        *,
        enabled: bool = True,
        width: int = 20,
        console: Console | None = None,
    ) -> None:
        self._console = console or get_console()
        self._enabled = enabled
        self._width = width
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self._stack = ExitStack()
        self.tests_done = 0

    @property
    def active(self) -> bool:
        return self._progress is not None

    def start(self) -> None:
        if self._progress is not None:
            return
        if not (self._enabled and self._console.is_terminal):
            _get_logger().debug("progress_disabled", enabled=self._enabled)
            return
        self._progress = Progress(
            TextColumn("Running tests:"),
            BarColumn(bar_width=self._width, style="cyan", pulse_style="cyan"),
            TextColumn("{task.completed} tests done"),
            console=self._console,
            auto_refresh=False,
            transient=True,
        )
        self._task_id = self._progress.add_task("tests", total=None)
        self._stack.enter_context(suppress_console_logs())
        self._progress.start()

    def update(self, tests_done: int) -> None:
        """Record the processed-test count and redraw the line."""
        self.tests_done = tests_done
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=tests_done, refresh=True)

    def stop(self) -> None:
        """Erase the progress line and re-enable console logs."""
        if self._progress is None:
            return
        try:
            self._progress.stop()
        finally:
            self._progress = None
            self._task_id = None
            self._stack.close()
        _get_logger().debug("progress_done", tests_done=self.tests_done)

    def __enter__(self) -> ProgressIndicator:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.stop()
