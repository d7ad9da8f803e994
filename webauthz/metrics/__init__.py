"""
Package metrics exposes Prometheus instrumentation for authorization
decisions.
"""

from .collector import (
    DecisionMetrics,
    MetricConfig
)

__all__ = [
    'DecisionMetrics',
    'MetricConfig'
]
