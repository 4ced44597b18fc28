"""Observability module for JobMatch"""
from .metrics import (
    MetricsCollector,
    MatchingMetrics,
    get_metrics_collector,
    counter,
    histogram,
    timer,
    StructuredLogger,
    get_logger
)

__all__ = [
    'MetricsCollector',
    'MatchingMetrics',
    'get_metrics_collector',
    'counter',
    'histogram',
    'timer',
    'StructuredLogger',
    'get_logger'
]
