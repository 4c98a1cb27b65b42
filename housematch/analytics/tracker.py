"""
Analytics sinks for scoring and onboarding events.

The scoring code never owns analytics state. Callers pass a sink into
CompatibilityEngine / TrustScoreCalculator; any object with a matching
track() method satisfies the AnalyticsSink protocol.

Sinks:
- LoggingAnalyticsSink: forwards events to the logging module
- InMemoryAnalyticsSink: keeps events on the instance, for tests and
  offline summaries
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, Set, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class AnalyticsSink(Protocol):
    """Interface for anything that records analytics events."""

    def track(self, event_type: str, **properties: Any) -> None:
        """Record one event."""
        ...


@dataclass
class AnalyticsEvent:
    """A single recorded event."""
    event_type: str
    properties: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "properties": dict(self.properties),
            "timestamp": self.timestamp.isoformat()
        }


class LoggingAnalyticsSink:
    """Sink that writes every event to a logger."""

    def __init__(self, name: Optional[str] = None, level: int = logging.INFO):
        self._logger = logging.getLogger(name) if name else logger
        self.level = level

    def track(self, event_type: str, **properties: Any) -> None:
        self._logger.log(self.level, f"Analytics event {event_type}: {properties}")


class InMemoryAnalyticsSink:
    """
    Sink that accumulates events on the instance.

    Attributes:
        events: Recorded events in arrival order
    """

    def __init__(self):
        self.events: List[AnalyticsEvent] = []

    def track(self, event_type: str, **properties: Any) -> None:
        self.events.append(AnalyticsEvent(event_type=event_type, properties=properties))

    def events_of(self, event_type: str) -> List[AnalyticsEvent]:
        """Events with the given type."""
        return [e for e in self.events if e.event_type == event_type]

    def summary(self) -> Dict[str, Any]:
        """
        Summarize recorded events.

        Onboarding events carry a session_id; "question_answered" events
        also carry question_category and time_spent.

        Returns:
            Dictionary with total_events, per-type counts, total_sessions,
            completion_rate (percent of started sessions that completed)
            and category_engagement (mean time_spent per category)
        """
        counts = Counter(e.event_type for e in self.events)
        started = self._sessions("started")
        completed = self._sessions("completed") & started
        completion_rate = len(completed) / len(started) * 100 if started else 0.0

        times: Dict[str, List[float]] = defaultdict(list)
        for event in self.events_of("question_answered"):
            category = event.properties.get("question_category")
            time_spent = event.properties.get("time_spent")
            if category and time_spent:
                times[category].append(time_spent)

        return {
            "total_events": len(self.events),
            "event_counts": dict(counts),
            "total_sessions": len(started),
            "completion_rate": completion_rate,
            "category_engagement": {
                category: sum(values) / len(values) for category, values in times.items()
            }
        }

    def _sessions(self, event_type: str) -> Set[Any]:
        return {
            e.properties["session_id"] for e in self.events_of(event_type)
            if "session_id" in e.properties
        }

    def export(self) -> List[Dict[str, Any]]:
        """Recorded events as dictionaries."""
        return [e.to_dict() for e in self.events]

    def clear(self) -> None:
        self.events = []
