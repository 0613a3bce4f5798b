"""
Vocabulary — Shared enums for the placeholder grammar.
"""

from cygen.vocabulary.enums import (
    FamilyTag,
    ScopeMarker,
    StatementSection,
)

__all__ = [
    "FamilyTag",
    "ScopeMarker",
    "StatementSection",
]
