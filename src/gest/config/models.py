"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags)
2. Environment variables (GEST__SECTION__KEY)
3. Project YAML (.gest.yaml in the working directory)
4. Global YAML (~/.config/gest/config.yaml)
5. Built-in defaults (this file)

Examples:
    GEST__LOGGING__LEVEL=DEBUG
    GEST__REPORT__PROGRESS=false
    GEST__REPORT__COMPRESS_UNCOVERED=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GEST__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Report output never goes through logging.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CoverageThresholds(BaseModel):
    """Upper bounds (exclusive, in percent) for each coverage colour band.

    Anything at or above ``green`` renders bright green.
    """

    red: float = 20.0
    bright_yellow: float = 50.0
    yellow: float = 70.0
    green: float = 90.0

    @model_validator(mode="after")
    def validate_order(self) -> "CoverageThresholds":
        bounds = [self.red, self.bright_yellow, self.yellow, self.green]
        if bounds != sorted(bounds):
            raise ValueError(f"Thresholds must be ascending, got {bounds}")
        if bounds[0] < 0 or bounds[-1] > 100:
            raise ValueError(f"Thresholds must be within 0-100, got {bounds}")
        return self


class ReportConfig(BaseModel):
    """Report rendering configuration.

    Env vars:
        GEST__REPORT__PROGRESS: Show the running-tests line on a TTY
        GEST__REPORT__PROGRESS_WIDTH: Width of the progress bar
        GEST__REPORT__SHOW_SUBTESTS: List subtests under their parent
        GEST__REPORT__COMPRESS_UNCOVERED: Print uncovered lines as ranges
    """

    progress: bool = Field(
        default=True,
        description="Show the progress line while reading events (TTY only).",
    )
    progress_width: int = Field(
        default=20,
        description="Progress bar width in cells.",
    )
    show_subtests: bool = Field(
        default=True,
        description="List subtests under their parent test in the grouped report.",
    )
    compress_uncovered: bool = Field(
        default=False,
        description="Render uncovered lines as ranges (1-3,7) instead of a full list.",
    )
    coverage_thresholds: CoverageThresholds = Field(default_factory=CoverageThresholds)

    @field_validator("progress_width")
    @classmethod
    def validate_progress_width(cls, v: int) -> int:
        if not (1 <= v <= 200):
            raise ValueError(f"Progress width must be 1-200, got {v}")
        return v


class GestConfig(BaseModel):
    """Root configuration for gest."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
