"""Monitoring for the subdomain router."""

from .metrics import MetricsCollector, metrics

__all__ = ["MetricsCollector", "metrics"]
