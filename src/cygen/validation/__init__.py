"""
Validation — Placeholder syntax checks and fix suggestions.
"""

from cygen.validation.diagnostics import (
    DEFAULT_THRESHOLD,
    Diagnostic,
    DiagnosticMatcher,
    create_diagnostic_matcher,
    levenshtein,
)
from cygen.validation.validator import (
    PLACEHOLDER_TOKEN,
    StatementValidationError,
    StatementValidationResult,
    StatementValidator,
    create_statement_validator,
)

__all__ = [
    # Diagnostics
    "DEFAULT_THRESHOLD",
    "Diagnostic",
    "DiagnosticMatcher",
    "create_diagnostic_matcher",
    "levenshtein",
    # Validator
    "PLACEHOLDER_TOKEN",
    "StatementValidationError",
    "StatementValidationResult",
    "StatementValidator",
    "create_statement_validator",
]
