"""
Errors — Fatal failures raised while compiling a scenario.

Unresolved placeholders are not errors; they are reported as warnings
on the compiled result.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cygen.validation.diagnostics import Diagnostic


class CygenError(Exception):
    """Base class for compiler errors."""
    pass


class ScenarioStructureError(CygenError):
    """Raised when a scenario is missing given/when/then or has empty lists."""
    pass


class PlaceholderSyntaxError(CygenError):
    """
    Raised when a statement holds a ``<...>`` token no family recognises.

    Carries the offending statement and, when one is close enough, the
    nearest known template.
    """

    def __init__(
        self,
        statement: str,
        token: str,
        suggestion: "Diagnostic | None" = None,
    ):
        self.statement = statement
        self.token = token
        self.suggestion = suggestion
        if suggestion is not None:
            message = (
                f'Invalid syntax found in statement: "{statement}". '
                f'Did you mean: "{suggestion.template}"?'
            )
        else:
            message = f'Invalid placeholder found in statement: "{statement}"'
        super().__init__(message)
