"""gest error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Coverage

Malformed input records are never errors; they are dropped where they are
read. Only failures that end the run are modelled here.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Coverage (3xxx)
    COVERAGE_PROFILE_UNREADABLE = 3001


@dataclass(frozen=True, slots=True)
class GestError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class ConfigError(GestError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class CoverageProfileError(GestError):
    """Coverage profile could not be opened or read."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "CoverageProfileError":
        return cls(
            code=ErrorCode.COVERAGE_PROFILE_UNREADABLE,
            message=f"{reason}: {path}",
            details={"path": path, "reason": reason},
        )
