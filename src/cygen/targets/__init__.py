"""
Targets — Code fragments for the test-automation API being generated.
"""

from cygen.targets import cypress

__all__ = ["cypress"]
