"""Metrics and structured logging for JobMatch.

Metrics are kept in memory so a single CLI run (or a test) can inspect how many
analyses ran and how long they took. Swap the collector for Prometheus or
OpenTelemetry if the analyzer is ever embedded in a long-running service.
"""
from __future__ import annotations
import json
import logging
import threading
import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class MetricData:
    """Container for metric data point"""
    name: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
    type: str = "counter"  # counter, histogram


class MetricsCollector:
    """Thread-safe metrics collector with in-memory storage."""

    def __init__(self):
        self._metrics: Dict[str, List[MetricData]] = defaultdict(list)
        self._lock = threading.Lock()

    def counter(self, name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
        """Record a counter metric (cumulative value)"""
        self._record(name, value, tags or {}, "counter")

    def histogram(self, name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
        """Record a histogram metric (distribution of values)"""
        self._record(name, value, tags or {}, "histogram")

    def timer(self, name: str, tags: Optional[Dict[str, str]] = None) -> "TimerContext":
        """Context manager for timing operations"""
        return TimerContext(self, name, tags or {})

    def _record(self, name: str, value: float, tags: Dict[str, str], metric_type: str) -> None:
        with self._lock:
            self._metrics[name].append(MetricData(
                name=name,
                value=value,
                tags=tags,
                type=metric_type
            ))

    def get_stats(self) -> Dict[str, Any]:
        """Get summary statistics of recorded metrics"""
        with self._lock:
            stats = {}
            for name, metrics in self._metrics.items():
                if metrics:
                    values = [m.value for m in metrics]
                    stats[name] = {
                        'count': len(values),
                        'latest': values[-1],
                        'sum': sum(values),
                        'avg': sum(values) / len(values)
                    }
            return stats

    def clear(self) -> None:
        """Clear all recorded metrics"""
        with self._lock:
            self._metrics.clear()


class TimerContext:
    """Context manager for measuring operation duration"""

    def __init__(self, collector: MetricsCollector, name: str, tags: Dict[str, str]):
        self.collector = collector
        self.name = name
        self.tags = tags
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None:
            duration = time.perf_counter() - self.start_time
            self.collector.histogram(f"{self.name}.duration_ms", duration * 1000, self.tags)


_global_metrics = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector instance"""
    return _global_metrics


def counter(name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
    """Record a counter metric using global collector"""
    _global_metrics.counter(name, value, tags)


def histogram(name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
    """Record a histogram metric using global collector"""
    _global_metrics.histogram(name, value, tags)


def timer(name: str, tags: Optional[Dict[str, str]] = None) -> TimerContext:
    """Context manager for timing operations using global collector"""
    return _global_metrics.timer(name, tags)


class MatchingMetrics:
    """Names of the metrics recorded by the analysis pipeline"""

    ANALYSES = "matching.analyses"
    ANALYZE_TIMER = "matching.analyze"
    SCORE = "matching.score"
    MATCHED_SKILLS = "matching.matched_skills"
    MISSING_SKILLS = "matching.missing_skills"
    REPORTS_EXPORTED = "reporting.exported"


class StructuredLogger:
    """Logger that appends keyword context as JSON to the message.

    Accepts the same ``extra={...}`` keyword the stdlib logger does, so call
    sites read like ordinary logging calls.
    """

    def __init__(self, name: str = "jobmatch"):
        self.name = name
        self._logger = logging.getLogger(name)

    def info(self, msg: str, **kwargs) -> None:
        self._log(logging.INFO, msg, kwargs)

    def debug(self, msg: str, **kwargs) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def _log(self, level: int, msg: str, context: Dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        # extra={...} is flattened into the context
        extra = context.pop("extra", None) or {}
        context = {**extra, **context}
        if context:
            self._logger.log(level, "%s | %s", msg, json.dumps(context, default=str, sort_keys=True))
        else:
            self._logger.log(level, msg)


def get_logger(name: str = "jobmatch") -> StructuredLogger:
    """Get a structured logger instance"""
    return StructuredLogger(name)
