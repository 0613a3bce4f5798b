"""
Compiler — Scenario compilation to Cypress spec scripts.

Resolves placeholders, groups conditional statements into a forest, and
renders the forest as nested blocks inside one test case.
"""

from cygen.compiler.resolver import (
    UnresolvedPlaceholder,
    Resolution,
    StatementResolver,
    create_resolver,
)
from cygen.compiler.tree import (
    ScenarioNode,
    build_forest,
    count_nodes,
    is_scope_open,
    is_scope_close,
)
from cygen.compiler.emitter import (
    Emission,
    CodeEmitter,
)
from cygen.compiler.compiler import (
    CompiledScript,
    WriteResult,
    ScenarioCompiler,
    create_compiler,
    compile_scenario,
)

__all__ = [
    # Resolver
    "UnresolvedPlaceholder",
    "Resolution",
    "StatementResolver",
    "create_resolver",
    # Tree
    "ScenarioNode",
    "build_forest",
    "count_nodes",
    "is_scope_open",
    "is_scope_close",
    # Emitter
    "Emission",
    "CodeEmitter",
    # Compiler
    "CompiledScript",
    "WriteResult",
    "ScenarioCompiler",
    "create_compiler",
    "compile_scenario",
]
