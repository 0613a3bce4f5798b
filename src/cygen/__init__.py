"""
cygen — Scenario-to-Cypress compiler.

Turns given/when/then scenarios written with ``<family_argument>``
placeholders into runnable Cypress spec scripts.
"""

__version__ = "0.1.0"
