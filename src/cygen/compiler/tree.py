"""
Scenario Tree — Groups when/then statements under conditional guards.

Only one conditional scope is open at a time. An ``<if_...>`` statement
met while a scope is open closes that scope and starts a sibling; it
never nests. ``<if_end>`` closes the open scope and produces no node.
"""

from dataclasses import dataclass, field
from typing import Iterable

from cygen.vocabulary import ScopeMarker


@dataclass
class ScenarioNode:
    """A statement and, for conditional guards, the statements it owns."""
    statement: str
    conditional: bool = False
    children: list["ScenarioNode"] = field(default_factory=list)
    
    @property
    def is_block(self) -> bool:
        """True when this node renders as a conditional block."""
        return bool(self.children)


def is_scope_close(statement: str) -> bool:
    return statement.strip() == ScopeMarker.CLOSE.value


def is_scope_open(statement: str) -> bool:
    return (
        statement.strip().startswith(ScopeMarker.OPEN_PREFIX.value)
        and not is_scope_close(statement)
    )


def build_forest(statements: Iterable[str]) -> list[ScenarioNode]:
    """
    Build the ordered forest for a when or then list.
    
    Plain statements attach to the open scope if there is one, otherwise
    they become roots.
    """
    forest: list[ScenarioNode] = []
    open_scope: ScenarioNode | None = None
    
    for statement in statements:
        if is_scope_close(statement):
            open_scope = None
        elif is_scope_open(statement):
            open_scope = ScenarioNode(statement=statement, conditional=True)
            forest.append(open_scope)
        elif open_scope is not None:
            open_scope.children.append(ScenarioNode(statement=statement))
        else:
            forest.append(ScenarioNode(statement=statement))
    
    return forest


def count_nodes(forest: Iterable[ScenarioNode]) -> int:
    """Total nodes in a forest, children included."""
    return sum(1 + count_nodes(node.children) for node in forest)
