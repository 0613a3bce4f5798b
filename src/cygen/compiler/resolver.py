"""
Statement Resolver — Rewrites placeholders into target code.

Families are applied in registry order. Within a family the statement
is scanned left to right; each occurrence whose argument fits a
sub-pattern is replaced by the generated snippet. Text that another
family already replaced is not matched again. Occurrences no
sub-pattern accepts stay in the text and are reported as unresolved.
"""

from dataclasses import dataclass
from typing import Iterable

from cygen.vocabulary import FamilyTag
from cygen.patterns import PLACEHOLDER_FAMILIES, PlaceholderFamily


@dataclass(frozen=True)
class UnresolvedPlaceholder:
    """A recognised family whose argument matched no sub-pattern."""
    family: FamilyTag
    text: str
    statement: str


@dataclass(frozen=True)
class Resolution:
    """Rewritten statement plus anything left unresolved."""
    text: str
    unresolved: tuple[UnresolvedPlaceholder, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.unresolved


class StatementResolver:
    """Replaces every resolvable placeholder in a statement."""
    
    def __init__(self, families: Iterable[PlaceholderFamily] | None = None):
        self.families = tuple(families) if families is not None else PLACEHOLDER_FAMILIES
    
    def resolve(self, statement: str) -> Resolution:
        # Occurrences are located on the raw statement so that a ">" inside
        # an already generated snippet never moves another placeholder's end
        spliced: list[tuple[int, int, str]] = []
        unresolved: list[UnresolvedPlaceholder] = []
        
        for family in self.families:
            pos = 0
            while True:
                found = family.search(statement, pos)
                if found is None:
                    break
                pos = found.end()
                if any(found.start() < end and start < found.end() for start, end, _ in spliced):
                    continue

                argument = found.group(1)
                sub = family.find_sub_pattern(argument)
                if sub is None:
                    unresolved.append(UnresolvedPlaceholder(
                        family=family.tag,
                        text=found.group(0),
                        statement=statement,
                    ))
                    continue
                
                spliced.append((found.start(), found.end(), sub.render(argument)))
        
        parts: list[str] = []
        last = 0
        for start, end, snippet in sorted(spliced):
            parts.append(statement[last:start])
            parts.append(snippet)
            last = end
        parts.append(statement[last:])
        
        return Resolution(text="".join(parts), unresolved=tuple(unresolved))
    
    def resolve_text(self, statement: str) -> str:
        """Resolve and return only the rewritten text."""
        return self.resolve(statement).text


def create_resolver() -> StatementResolver:
    """Factory for statement resolver."""
    return StatementResolver()
