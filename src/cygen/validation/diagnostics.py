"""
Diagnostics — Nearest-template suggestions for invalid statements.

Best-effort only: a suggestion changes the error message, never whether
a statement passes.
"""

from dataclasses import dataclass
from typing import Iterable

from cygen.patterns import iter_templates


DEFAULT_THRESHOLD = 10


@dataclass(frozen=True)
class Diagnostic:
    """A suggested template and the edit distance that produced it."""
    template: str
    distance: int


def levenshtein(s1: str, s2: str) -> int:
    """Calculate Levenshtein distance."""
    if len(s1) < len(s2):
        return levenshtein(s2, s1)

    if len(s2) == 0:
        return len(s1)

    prev_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        curr_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = prev_row[j + 1] + 1
            deletions = curr_row[j] + 1
            substitutions = prev_row[j] + (c1 != c2)
            curr_row.append(min(insertions, deletions, substitutions))
        prev_row = curr_row

    return prev_row[-1]


class DiagnosticMatcher:
    """
    Finds the known template closest to a failing statement.

    Ties keep the template declared first in the registry.
    """
    
    def __init__(
        self,
        threshold: int = DEFAULT_THRESHOLD,
        templates: Iterable[str] | None = None,
    ):
        self.threshold = threshold
        self.templates = list(templates) if templates is not None else iter_templates()
    
    def closest(self, statement: str) -> Diagnostic | None:
        """Return the nearest template within threshold, or None."""
        best: Diagnostic | None = None
        
        for template in self.templates:
            distance = levenshtein(statement, template)
            if distance > self.threshold:
                continue
            if best is None or distance < best.distance:
                best = Diagnostic(template=template, distance=distance)
        
        return best


def create_diagnostic_matcher(threshold: int = DEFAULT_THRESHOLD) -> DiagnosticMatcher:
    """Factory for diagnostic matcher."""
    return DiagnosticMatcher(threshold=threshold)
