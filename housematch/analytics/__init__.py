"""Analytics sinks injected into the scoring code."""

from .tracker import (
    AnalyticsSink,
    AnalyticsEvent,
    LoggingAnalyticsSink,
    InMemoryAnalyticsSink
)

__all__ = [
    "AnalyticsSink",
    "AnalyticsEvent",
    "LoggingAnalyticsSink",
    "InMemoryAnalyticsSink"
]
