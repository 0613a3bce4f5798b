"""
Spec Writers — Persist generated scripts.

The compiler only hands text to a writer; any OSError a writer raises is
caught and reported by the compiler.
"""

import re
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SpecWriter(Protocol):
    """
    Protocol for script persistence backends.
    """
    
    def write(self, path: str | Path, content: str) -> None:
        """Write a script to path."""
        ...


class FileSpecWriter:
    """Writes scripts to disk, creating parent directories as needed."""
    
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
    
    def write(self, path: str | Path, content: str) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding=self.encoding)


class InMemoryWriter:
    """
    In-memory writer for testing.
    
    Scripts are lost when process terminates.
    """
    
    def __init__(self):
        self.files: dict[str, str] = {}
    
    def write(self, path: str | Path, content: str) -> None:
        self.files[str(path)] = content


def spec_filename(scenario_name: str, suffix: str = ".spec.ts") -> str:
    """Derive a file name from a scenario name, e.g. 'Log in!' -> 'log-in.spec.ts'."""
    slug = re.sub(r"[^a-z0-9]+", "-", scenario_name.lower()).strip("-")
    return f"{slug or 'scenario'}{suffix}"
