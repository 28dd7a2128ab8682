"""Metrics collection for the subdomain router."""

from typing import Dict, Any
from .prometheus import PrometheusMetrics


class MetricsCollector:
    """Collects and exposes metrics for monitoring."""

    def __init__(self):
        """Initialize metrics collector."""
        self.prometheus = PrometheusMetrics()
        self._counters: Dict[str, int] = {}

    def increment_counter(self, name: str, labels: Dict[str, str] = None):
        """Increment a counter metric."""
        key = f"{name}:{labels or {}}"
        self._counters[key] = self._counters.get(key, 0) + 1
        self.prometheus.increment_counter(name, labels)

    def render(self) -> bytes:
        """Prometheus exposition text."""
        return self.prometheus.get_metrics()

    def get_metrics(self) -> Dict[str, Any]:
        """Get all metrics as dictionary."""
        return {"counters": dict(self._counters)}


# Global metrics instance
metrics = MetricsCollector()
