"""
Shared test configuration.
"""

import logging

import pytest

from cygen.observability import reset_metrics, set_scenario_name


@pytest.fixture(autouse=True)
def clean_observability():
    """Drop handlers bound to per-test streams and zero the metrics."""
    yield
    logging.getLogger("cygen").handlers.clear()
    set_scenario_name(None)
    reset_metrics()
