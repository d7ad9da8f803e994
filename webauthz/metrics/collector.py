"""
Prometheus metrics for authorization decisions.

Metrics are optional: the checker records them only when a collector is
configured, and they never influence a decision.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


logger = logging.getLogger(__name__)


@dataclass
class MetricConfig:
    """Configuration for metrics collection."""

    enabled: bool = True
    namespace: str = "webauthz"


class DecisionMetrics:
    """Collects decision and per-authorizer counters."""

    def __init__(self, config: Optional[MetricConfig] = None,
                 registry: Optional[CollectorRegistry] = None):
        """
        Initialize the collector.

        Args:
            config: Metrics configuration
            registry: Prometheus registry; a private one is created if omitted
        """
        self.config = config or MetricConfig()
        self.registry = registry or CollectorRegistry()

        namespace = self.config.namespace
        self.decisions = Counter(
            f'{namespace}_authorization_decisions_total',
            'Total number of authorization decisions',
            ['allowed'],
            registry=self.registry
        )

        self.authorizer_checks = Counter(
            f'{namespace}_authorizer_checks_total',
            'Total number of individual authorizer checks',
            ['authorizer', 'result'],
            registry=self.registry
        )

        self.decision_latency = Histogram(
            f'{namespace}_authorization_duration_seconds',
            'Authorization check duration in seconds',
            buckets=[0.0001, 0.0002, 0.0005, 0.001, 0.002, 0.005, 0.01, 0.02, 0.05, 0.1],
            registry=self.registry
        )

        if not self.config.enabled:
            logger.info("Metrics collection disabled")

    def record_decision(self, allowed: bool, duration: float) -> None:
        if not self.config.enabled:
            return
        self.decisions.labels(allowed=str(allowed).lower()).inc()
        self.decision_latency.observe(duration)

    def record_authorizer_check(self, authorizer_name: str, allowed: bool) -> None:
        if not self.config.enabled:
            return
        result = "allowed" if allowed else "denied"
        self.authorizer_checks.labels(authorizer=authorizer_name, result=result).inc()

    def get_sample_value(self, name: str, labels: Optional[dict] = None) -> Optional[float]:
        """Read back a sample from the registry."""
        return self.registry.get_sample_value(name, labels or {})

    def generate_latest(self) -> bytes:
        """Render the registry in the Prometheus text format."""
        return generate_latest(self.registry)
