"""
Schemas — Input records accepted by the compiler.
"""

from cygen.schemas.scenario import (
    Scenario,
    load_scenario,
    load_scenarios,
)

__all__ = [
    "Scenario",
    "load_scenario",
    "load_scenarios",
]
