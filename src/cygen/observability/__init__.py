"""
Observability — Logging and metrics for cygen.

Provides:
- Structured logging tagged with the scenario being compiled
- Counters and histograms for compilation activity
"""

from cygen.observability.logging import (
    set_scenario_name,
    get_scenario_name,
    configure_logging,
    get_logger,
    LogContext,
    JSONFormatter,
    ReadableFormatter,
)
from cygen.observability.metrics import (
    Counter,
    Histogram,
    MetricsRegistry,
    get_metrics,
    reset_metrics,
)

__all__ = [
    # Logging
    "set_scenario_name",
    "get_scenario_name",
    "configure_logging",
    "get_logger",
    "LogContext",
    "JSONFormatter",
    "ReadableFormatter",
    # Metrics
    "Counter",
    "Histogram",
    "MetricsRegistry",
    "get_metrics",
    "reset_metrics",
]
