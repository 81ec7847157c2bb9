"""Test event aggregation."""

from gest.testing.aggregator import EventAggregator, consume, iter_events, prettify
from gest.testing.models import (
    PackageResult,
    ParentTest,
    RunSummary,
    Subtest,
    TestEvent,
)

__all__ = [
    "EventAggregator",
    "consume",
    "iter_events",
    "prettify",
    "PackageResult",
    "ParentTest",
    "RunSummary",
    "Subtest",
    "TestEvent",
]
