"""
Statement Validator — Rejects placeholders no family recognises.

Only the outer ``<tag_argument>`` shape is checked here. A statement can
pass validation and still hold an argument no sub-pattern accepts; the
resolver reports that case as unresolved instead of failing.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable

from cygen.errors import PlaceholderSyntaxError
from cygen.patterns import match_family
from cygen.validation.diagnostics import Diagnostic, DiagnosticMatcher


# Same boundary as the family shapes: a token ends at the last ">" before
# the next "<" or the end of the statement
PLACEHOLDER_TOKEN = re.compile(r"<(.+?)>(?=[^<>]*(?:<|$))")


# =============================================================================
# VALIDATION RESULT
# =============================================================================

@dataclass
class StatementValidationError:
    """Single unrecognised token."""
    token: str
    message: str
    suggestion: Diagnostic | None = None


@dataclass
class StatementValidationResult:
    """Result of validating one statement."""
    valid: bool
    statement: str
    errors: list[StatementValidationError] = field(default_factory=list)


# =============================================================================
# STATEMENT VALIDATOR
# =============================================================================

class StatementValidator:
    """
    Checks every placeholder token of a statement against the registry.
    
    On failure, asks the diagnostic matcher for the closest template so
    the error can suggest a fix.
    """
    
    def __init__(self, matcher: DiagnosticMatcher | None = None):
        self.matcher = matcher or DiagnosticMatcher()
    
    def invalid_tokens(self, statement: str) -> list[str]:
        """Return every ``<...>`` token whose shape no family accepts."""
        return [
            found.group(0)
            for found in PLACEHOLDER_TOKEN.finditer(statement)
            if match_family(found.group(0)) is None
        ]
    
    def check(self, statement: str) -> StatementValidationResult:
        """
        Validate a statement without raising.
        
        Returns StatementValidationResult with valid=True if every token
        is recognised.
        """
        tokens = self.invalid_tokens(statement)
        if not tokens:
            return StatementValidationResult(valid=True, statement=statement)
        
        suggestion = self.matcher.closest(statement)
        errors = [
            StatementValidationError(
                token=token,
                message=f"Unrecognised placeholder {token}",
                suggestion=suggestion,
            )
            for token in tokens
        ]
        return StatementValidationResult(valid=False, statement=statement, errors=errors)
    
    def validate(self, statement: str) -> None:
        """
        Validate a statement.
        
        Raises:
            PlaceholderSyntaxError: on the first unrecognised token
        """
        for found in PLACEHOLDER_TOKEN.finditer(statement):
            token = found.group(0)
            if match_family(token) is None:
                raise PlaceholderSyntaxError(
                    statement=statement,
                    token=token,
                    suggestion=self.matcher.closest(statement),
                )
    
    def validate_all(self, statements: Iterable[str]) -> None:
        """Validate statements in order, failing fast."""
        for statement in statements:
            self.validate(statement)


def create_statement_validator(threshold: int | None = None) -> StatementValidator:
    """Create a statement validator instance."""
    if threshold is None:
        return StatementValidator()
    return StatementValidator(matcher=DiagnosticMatcher(threshold=threshold))
