"""
Vocabulary enums — the fixed placeholder grammar.

Every placeholder in a scenario statement is written as
``<family_argument>``. The family tag picks the row of the pattern
registry; the argument is matched against that family's sub-patterns.
"""

from enum import Enum


# =============================================================================
# PLACEHOLDER FAMILIES
# =============================================================================

class FamilyTag(str, Enum):
    """
    Outer category of a placeholder.

    Declaration order here is the registry's resolution order.
    """
    END = "end"              # Null marker, renders to nothing
    VISIT = "visit"          # Page navigation
    INPUT = "input"          # Typing into a named input
    CLICK = "click"          # Click on any selector
    BUTTON = "button"        # Submit / cancel buttons
    IF = "if"                # Conditional guards
    SELECTOR = "selector"    # Lookup by visible text or name
    ELEMENT = "element"      # Structural elements (table, list, item)
    ACTION = "action"        # type / select / check / uncheck
    ASSERT = "assert"        # Text and checkbox assertions
    ALERT = "alert"          # window:alert text


# =============================================================================
# CONDITIONAL MARKERS
# =============================================================================

class ScopeMarker(str, Enum):
    """Literal statements that drive conditional grouping."""
    OPEN_PREFIX = "<if_"
    CLOSE = "<if_end>"


class StatementSection(str, Enum):
    """Where a statement lives inside a scenario."""
    GIVEN = "given"
    WHEN = "when"
    THEN = "then"
