"""
Configuration — Rendering options for the compiler.
"""

import os
from dataclasses import dataclass


@dataclass
class CompilerConfig:
    """Configuration for script generation."""
    indent: str = "  "
    diagnostic_threshold: int = 10  # Max edit distance for a suggestion
    include_reference_types: bool = True

    @classmethod
    def from_env(cls) -> "CompilerConfig":
        """
        Build config from environment variables, falling back to defaults.

        Reads CYGEN_INDENT_WIDTH, CYGEN_DIAGNOSTIC_THRESHOLD and
        CYGEN_REFERENCE_TYPES ("0"/"false"/"no" disable the directive).
        """
        defaults = cls()
        width = os.environ.get("CYGEN_INDENT_WIDTH")
        threshold = os.environ.get("CYGEN_DIAGNOSTIC_THRESHOLD")
        reference = os.environ.get("CYGEN_REFERENCE_TYPES")

        try:
            indent = " " * int(width) if width else defaults.indent
            diagnostic_threshold = (
                int(threshold) if threshold else defaults.diagnostic_threshold
            )
        except ValueError as e:
            raise ValueError(f"Invalid cygen environment setting: {e}") from e

        include_reference_types = defaults.include_reference_types
        if reference is not None:
            include_reference_types = reference.strip().lower() not in {"0", "false", "no"}

        return cls(
            indent=indent,
            diagnostic_threshold=diagnostic_threshold,
            include_reference_types=include_reference_types,
        )
