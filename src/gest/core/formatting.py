"""Summary formatting utilities for consistent terminal output."""

from __future__ import annotations

from collections.abc import Iterable


def format_seconds(seconds: float) -> str:
    """Format a duration the way go test reports it.

    Examples:
        1.234 -> "1.23s"
        12.0 -> "12.00s"
    """
    return f"{seconds:.2f}s"


def format_lines(lines: Iterable[int]) -> str:
    """Join line numbers with commas: [3, 7, 9] -> "3,7,9"."""
    return ",".join(str(n) for n in lines)


def compress_ranges(lines: list[int]) -> str:
    """Collapse sorted line numbers into ranges.

    Examples:
        [1, 2, 3, 5, 7, 8] -> "1-3,5,7-8"
        [] -> ""
    """
    if not lines:
        return ""

    parts: list[str] = []
    start = prev = lines[0]
    for n in lines[1:]:
        if n == prev + 1:
            prev = n
            continue
        parts.append(f"{start}-{prev}" if prev != start else str(start))
        start = prev = n
    parts.append(f"{start}-{prev}" if prev != start else str(start))
    return ",".join(parts)
