"""
Logging — Structured logging with scenario name propagation.

Every record emitted while a scenario is being compiled carries that
scenario's name, so interleaved compilations stay readable.
"""

import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any


# Context variable for the scenario being compiled
_scenario_name: ContextVar[str | None] = ContextVar("scenario_name", default=None)


def set_scenario_name(name: str | None) -> None:
    """Set scenario name for current context."""
    _scenario_name.set(name or None)


def get_scenario_name() -> str | None:
    """Get scenario name from current context."""
    return _scenario_name.get()


class ScenarioFilter(logging.Filter):
    """Adds scenario name to log records."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        record.scenario = get_scenario_name() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "scenario": getattr(record, "scenario", None),
        }
        
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for terminals.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        scenario = getattr(record, "scenario", "-")
        base = f"{record.levelname:<7} [{scenario}] {record.name}: {record.getMessage()}"
        
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        
        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure cygen logging.
    
    Args:
        level: Logging level
        json_format: Use JSON format (for CI log collectors)
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(ScenarioFilter())
    
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())
    
    cygen_logger = logging.getLogger("cygen")
    cygen_logger.setLevel(level)
    cygen_logger.handlers.clear()
    cygen_logger.addHandler(handler)
    cygen_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a cygen component."""
    return logging.getLogger(f"cygen.{name}")


class LogContext:
    """
    Context manager tagging log records with a scenario name.
    
    Usage:
        with LogContext(scenario.name):
            logger.info("Compiling...")  # Includes scenario name
    """
    
    def __init__(self, scenario_name: str | None):
        self.scenario_name = scenario_name
        self._token = None
    
    def __enter__(self):
        self._token = _scenario_name.set(self.scenario_name or None)
        return self
    
    def __exit__(self, *args):
        if self._token is not None:
            _scenario_name.reset(self._token)
