"""
Metrics — Process-wide counters for compilation activity.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Any


class Counter:
    """Monotonically increasing counter."""
    
    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._value = 0.0
        self._lock = Lock()
    
    def inc(self, amount: float = 1.0) -> None:
        """Increment counter."""
        with self._lock:
            self._value += amount
    
    @property
    def value(self) -> float:
        return self._value
    
    def reset(self) -> None:
        """Reset counter (for testing)."""
        with self._lock:
            self._value = 0.0


class Histogram:
    """
    Simple histogram for tracking distributions.
    
    Tracks count, sum, min, max for calculating stats.
    """
    
    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._count = 0
        self._sum = 0.0
        self._min = float("inf")
        self._max = float("-inf")
        self._lock = Lock()
    
    def observe(self, value: float) -> None:
        """Record an observation."""
        with self._lock:
            self._count += 1
            self._sum += value
            self._min = min(self._min, value)
            self._max = max(self._max, value)
    
    @property
    def count(self) -> int:
        return self._count
    
    @property
    def avg(self) -> float:
        if self._count == 0:
            return 0.0
        return self._sum / self._count
    
    @property
    def min(self) -> float:
        return self._min if self._count > 0 else 0.0
    
    @property
    def max(self) -> float:
        return self._max if self._count > 0 else 0.0
    
    def reset(self) -> None:
        with self._lock:
            self._count = 0
            self._sum = 0.0
            self._min = float("inf")
            self._max = float("-inf")
    
    def to_dict(self) -> dict[str, float]:
        return {
            "count": self._count,
            "sum": self._sum,
            "avg": self.avg,
            "min": self.min,
            "max": self.max,
        }


@dataclass
class MetricsRegistry:
    """
    Registry for all cygen metrics.
    """
    scenarios_compiled: Counter = field(
        default_factory=lambda: Counter("scenarios_compiled", "Scenarios compiled")
    )
    scenarios_failed: Counter = field(
        default_factory=lambda: Counter("scenarios_failed", "Scenarios rejected")
    )
    unresolved_placeholders: Counter = field(
        default_factory=lambda: Counter(
            "unresolved_placeholders", "Placeholders left in output unresolved"
        )
    )
    write_failures: Counter = field(
        default_factory=lambda: Counter("write_failures", "Spec files not written")
    )
    statements_per_scenario: Histogram = field(
        default_factory=lambda: Histogram(
            "statements_per_scenario", "Raw statements per compiled scenario"
        )
    )
    
    def to_dict(self) -> dict[str, Any]:
        """Export all metrics as dict."""
        return {
            "scenarios": {
                "compiled": self.scenarios_compiled.value,
                "failed": self.scenarios_failed.value,
                "statements": self.statements_per_scenario.to_dict(),
            },
            "output": {
                "unresolved_placeholders": self.unresolved_placeholders.value,
                "write_failures": self.write_failures.value,
            },
        }
    
    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        self.scenarios_compiled.reset()
        self.scenarios_failed.reset()
        self.unresolved_placeholders.reset()
        self.write_failures.reset()
        self.statements_per_scenario.reset()


# Global metrics registry
_metrics = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get global metrics registry."""
    return _metrics


def reset_metrics() -> None:
    """Reset all metrics (for testing)."""
    _metrics.reset()
