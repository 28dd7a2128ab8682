"""Prometheus metrics integration."""

from typing import Dict, Optional, Tuple

from prometheus_client import CollectorRegistry, Counter, generate_latest

# Counters the router knows about: name -> (description, label names)
COUNTER_DEFINITIONS: Dict[str, Tuple[str, Tuple[str, ...]]] = {
    "subdomain_routing_decisions_total": (
        "Routing decisions taken by the subdomain middleware",
        ("action",),
    ),
    "subdomain_routing_excluded_total": (
        "Requests skipped by the path exclusion rule",
        (),
    ),
}


class PrometheusMetrics:
    """Prometheus counters in a private registry."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()
        self._counters: Dict[str, Counter] = {
            name: Counter(name, description, labelnames, registry=self.registry)
            for name, (description, labelnames) in COUNTER_DEFINITIONS.items()
        }

    def increment_counter(self, name: str, labels: Optional[Dict[str, str]] = None):
        """Increment a counter."""
        counter = self._counters.get(name)
        if counter is None:
            raise KeyError(f"Unknown counter: {name}")
        if labels:
            counter.labels(**labels).inc()
        else:
            counter.inc()

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus exposition format."""
        return generate_latest(self.registry)
