"""
Code Emitter — Renders a scenario forest as target source lines.

Nodes are emitted depth-first in input order. Conditional nodes with
children become ``if (...) { ... }`` blocks; everything else is a single
resolved line.
"""

from dataclasses import dataclass, field
from typing import Iterable

from cygen.targets import cypress as cy
from cygen.compiler.resolver import StatementResolver, UnresolvedPlaceholder
from cygen.compiler.tree import ScenarioNode


@dataclass
class Emission:
    """Emitted lines plus placeholders that could not be resolved."""
    lines: list[str] = field(default_factory=list)
    unresolved: list[UnresolvedPlaceholder] = field(default_factory=list)
    
    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


class CodeEmitter:
    """Walks a forest and renders nested conditional blocks."""
    
    def __init__(
        self,
        resolver: StatementResolver | None = None,
        indent: str = "  ",
    ):
        self.resolver = resolver or StatementResolver()
        self.indent = indent
    
    def emit(self, forest: Iterable[ScenarioNode], depth: int = 0) -> Emission:
        """Render a forest starting at the given indentation depth."""
        emission = Emission()
        self._emit_nodes(forest, depth, emission)
        return emission
    
    def _emit_nodes(
        self,
        nodes: Iterable[ScenarioNode],
        depth: int,
        emission: Emission,
    ) -> None:
        for node in nodes:
            resolution = self.resolver.resolve(node.statement)
            emission.unresolved.extend(resolution.unresolved)
            
            if node.is_block:
                emission.lines.append(self._line(cy.if_open(resolution.text), depth))
                self._emit_nodes(node.children, depth + 1, emission)
                emission.lines.append(self._line(cy.if_close(), depth))
            else:
                emission.lines.append(self._line(resolution.text, depth))
    
    def _line(self, text: str, depth: int) -> str:
        if not text:
            return ""
        return f"{self.indent * depth}{text}"
