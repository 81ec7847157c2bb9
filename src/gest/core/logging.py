"""Structured logging for gest.

Diagnostics only: the report itself is printed by the renderer and never goes
through logging. Each configured output gets its own stdlib handler with a
structlog ``ProcessorFormatter``; stream handlers stay quiet while the
progress line is on screen.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from gest.config.models import LoggingConfig, LogOutputConfig


class ConsoleSuppressingFilter(logging.Filter):
    """Drop records while the progress indicator owns the terminal line."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        # Import here to avoid circular dependency
        from gest.core.progress import is_console_suppressed

        return not is_console_suppressed()


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]


def _stream(destination: str) -> TextIO | None:
    if destination == "stderr":
        return sys.stderr
    if destination == "stdout":
        return sys.stdout
    return None


def _handler_for(
    output: LogOutputConfig,
    level: int,
    processors: list[structlog.types.Processor],
) -> logging.Handler:
    stream = _stream(output.destination)
    handler: logging.Handler
    if stream is not None:
        handler = logging.StreamHandler(stream)
        handler.addFilter(ConsoleSuppressingFilter())
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        colors = stream is not None and stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)

    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)
    )
    return handler


def configure_logging(config: LoggingConfig | None = None) -> None:
    """(Re)configure structlog and the root logger from ``config``.

    Existing root handlers are closed and replaced, so this can run once with
    defaults at startup and again after the config files are loaded.
    """
    from gest.config.models import LoggingConfig

    config = config or LoggingConfig()
    root_level = logging.getLevelName(config.level)
    processors = _shared_processors()

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Don't cache - allows reconfiguration and respects level changes
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)
        old.close()
    root_logger.setLevel(root_level)

    for output in config.outputs:
        level = logging.getLevelName(output.level or config.level)
        root_logger.addHandler(_handler_for(output, level, processors))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
