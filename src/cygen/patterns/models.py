"""
Pattern Models — Placeholder families and their sub-patterns.

A PlaceholderFamily recognises the outer ``<tag_argument>`` shape. Each
of its SubPatterns recognises one argument shape and knows how to turn
the captured groups into target code.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterator

from cygen.vocabulary import FamilyTag


_TEMPLATE_SLOT = re.compile(r"\[[^\]]+\]")


@dataclass(frozen=True)
class SubPattern:
    """
    One recognised argument shape within a family.

    ``code`` receives the captured groups positionally and must only be
    called with groups produced by ``matcher``.
    """
    matcher: re.Pattern[str]
    template: str
    code: Callable[..., str]

    def match(self, argument: str) -> re.Match[str] | None:
        """Match the whole argument, never a fragment of it."""
        return self.matcher.fullmatch(argument)

    def render(self, argument: str) -> str | None:
        """Return generated code, or None if the argument doesn't fit."""
        found = self.match(argument)
        if found is None:
            return None
        return self.code(*found.groups())

    def example(self, *values: str) -> str:
        """Fill the template's ``[slot]`` markers in order with values."""
        replacements = iter(values)
        return _TEMPLATE_SLOT.sub(lambda _: next(replacements), self.template)

    @property
    def slot_count(self) -> int:
        return len(_TEMPLATE_SLOT.findall(self.template))


@dataclass(frozen=True)
class PlaceholderFamily:
    """
    Outer placeholder shape plus its ordered sub-patterns.

    ``shape`` must expose the argument as group 1.
    """
    tag: FamilyTag
    shape: re.Pattern[str]
    sub_patterns: tuple[SubPattern, ...]
    description: str = ""

    def accepts_token(self, token: str) -> bool:
        """Check whether a full ``<...>`` token has this family's shape."""
        return self.shape.fullmatch(token) is not None

    def search(self, text: str, pos: int = 0) -> re.Match[str] | None:
        """Find the next occurrence of this family's shape at or after pos."""
        return self.shape.search(text, pos)

    def find_sub_pattern(self, argument: str) -> SubPattern | None:
        """First sub-pattern accepting the argument, in declaration order."""
        for sub in self.sub_patterns:
            if sub.match(argument) is not None:
                return sub
        return None

    def templates(self) -> Iterator[str]:
        for sub in self.sub_patterns:
            yield sub.template
