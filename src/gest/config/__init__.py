"""Config module exports."""

from gest.config.loader import load_config
from gest.config.models import (
    CoverageThresholds,
    GestConfig,
    LoggingConfig,
    LogOutputConfig,
    ReportConfig,
)

__all__ = [
    "load_config",
    "CoverageThresholds",
    "GestConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ReportConfig",
]
