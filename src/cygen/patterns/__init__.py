"""
Patterns — The placeholder registry.

Surface grammar: ``<family_argument>``; ``<if_end>`` closes
a conditional scope.
"""

from cygen.patterns.models import (
    SubPattern,
    PlaceholderFamily,
)
from cygen.patterns.registry import (
    PLACEHOLDER_FAMILIES,
    END_FAMILY,
    IF_FAMILY,
    get_family,
    get_all_families,
    match_family,
    find_sub_pattern,
    iter_templates,
)

__all__ = [
    # Models
    "SubPattern",
    "PlaceholderFamily",
    # Registry
    "PLACEHOLDER_FAMILIES",
    "END_FAMILY",
    "IF_FAMILY",
    "get_family",
    "get_all_families",
    "match_family",
    "find_sub_pattern",
    "iter_templates",
]
