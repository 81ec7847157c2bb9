"""Core module exports."""

from gest.core.errors import (
    ConfigError,
    CoverageProfileError,
    ErrorCode,
    GestError,
)
from gest.core.logging import configure_logging, get_logger
from gest.core.progress import ProgressIndicator

__all__ = [
    # Errors
    "ConfigError",
    "CoverageProfileError",
    "ErrorCode",
    "GestError",
    # Logging
    "configure_logging",
    "get_logger",
    # Progress
    "ProgressIndicator",
]
