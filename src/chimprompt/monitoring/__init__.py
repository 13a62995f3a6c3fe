"""
Monitoring
Prometheus-based metrics for the authoring engine
"""

from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
]
