"""
Output — Where compiled scripts go.
"""

from cygen.output.writer import (
    SpecWriter,
    FileSpecWriter,
    InMemoryWriter,
    spec_filename,
)

__all__ = [
    "SpecWriter",
    "FileSpecWriter",
    "InMemoryWriter",
    "spec_filename",
]
