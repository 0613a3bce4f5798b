"""
Scenario Compiler — Turns a scenario into a complete Cypress spec.

Pipeline:
1. Check structure (given/when/then present, lists non-empty)
2. Validate every raw statement, failing fast
3. Build when/then forests
4. Resolve the given statement
5. Emit when then then, wrapped in one describe/it test case
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cygen.config import CompilerConfig
from cygen.errors import CygenError
from cygen.observability import LogContext, get_logger, get_metrics
from cygen.output import FileSpecWriter, SpecWriter
from cygen.schemas import Scenario, load_scenario
from cygen.targets import cypress as cy
from cygen.validation import DiagnosticMatcher, StatementValidator
from cygen.compiler.emitter import CodeEmitter
from cygen.compiler.resolver import StatementResolver, UnresolvedPlaceholder
from cygen.compiler.tree import build_forest, count_nodes


logger = get_logger("compiler")


@dataclass
class CompiledScript:
    """Result of compiling one scenario."""
    scenario_name: str
    script: str
    warnings: list[UnresolvedPlaceholder] = field(default_factory=list)
    node_count: int = 0


@dataclass
class WriteResult:
    """Outcome of compiling and persisting one scenario."""
    success: bool
    path: str
    compiled: CompiledScript | None = None
    error: str | None = None


class ScenarioCompiler:
    """
    Compiles scenarios into Cypress spec scripts.
    
    Holds no per-call state, so one instance can serve many
    compilations, concurrently included.
    """
    
    def __init__(
        self,
        config: CompilerConfig | None = None,
        validator: StatementValidator | None = None,
        resolver: StatementResolver | None = None,
    ):
        self.config = config or CompilerConfig()
        self.validator = validator or StatementValidator(
            matcher=DiagnosticMatcher(threshold=self.config.diagnostic_threshold)
        )
        self.resolver = resolver or StatementResolver()
        self.emitter = CodeEmitter(resolver=self.resolver, indent=self.config.indent)
    
    def compile(self, scenario: Scenario | dict[str, Any]) -> CompiledScript:
        """
        Compile a scenario.
        
        Raises:
            ScenarioStructureError: scenario is missing parts or has empty lists
            PlaceholderSyntaxError: a statement holds an unrecognised placeholder
        """
        metrics = get_metrics()
        try:
            scenario = load_scenario(scenario)
        except CygenError:
            metrics.scenarios_failed.inc()
            raise
        
        with LogContext(scenario.name):
            try:
                self.validator.validate_all(
                    statement for _, statement in scenario.statements()
                )
            except CygenError as e:
                metrics.scenarios_failed.inc()
                logger.warning(f"Rejected: {e}")
                raise
            
            when_forest = build_forest(scenario.when)
            then_forest = build_forest(scenario.then)
            logger.debug(
                f"Built forests: when={len(when_forest)} roots, "
                f"then={len(then_forest)} roots"
            )
            
            given = self.resolver.resolve(scenario.given)
            body_depth = 2
            when_code = self.emitter.emit(when_forest, depth=body_depth)
            then_code = self.emitter.emit(then_forest, depth=body_depth)
            
            warnings = [*given.unresolved, *when_code.unresolved, *then_code.unresolved]
            for warning in warnings:
                logger.warning(
                    f"Unresolved placeholder {warning.text} in statement "
                    f'"{warning.statement}"'
                )
            
            indent = self.config.indent
            lines: list[str] = []
            if self.config.include_reference_types:
                lines.append(cy.REFERENCE_DIRECTIVE)
            lines.append(cy.describe_open(scenario.name))
            lines.append(indent + cy.it_open(scenario.given))
            lines.append(indent * body_depth + given.text if given.text else "")
            lines.append("")
            lines.extend(when_code.lines)
            lines.append("")
            lines.extend(then_code.lines)
            lines.append(indent + cy.callback_close())
            lines.append(cy.callback_close())
            
            metrics.scenarios_compiled.inc()
            metrics.unresolved_placeholders.inc(len(warnings))
            metrics.statements_per_scenario.observe(scenario.statement_count)
            node_count = count_nodes(when_forest) + count_nodes(then_forest)
            logger.info(
                f"Compiled with {len(warnings)} unresolved placeholder(s)",
                extra={"extra_data": {
                    "statements": scenario.statement_count,
                    "nodes": node_count,
                    "unresolved": len(warnings),
                }},
            )
            
            return CompiledScript(
                scenario_name=scenario.name,
                script="\n".join(lines) + "\n",
                warnings=warnings,
                node_count=node_count,
            )
    
    def compile_to_file(
        self,
        scenario: Scenario | dict[str, Any],
        path: str | Path,
        writer: SpecWriter | None = None,
    ) -> WriteResult:
        """
        Compile a scenario and hand the script to a writer.
        
        Compilation errors still raise. Writer failures are logged and
        reported in the returned WriteResult; the script is discarded.
        """
        compiled = self.compile(scenario)
        writer = writer or FileSpecWriter()
        
        with LogContext(compiled.scenario_name):
            try:
                writer.write(path, compiled.script)
            except Exception as e:
                get_metrics().write_failures.inc()
                logger.error(f"Error generating spec file: {e}")
                return WriteResult(success=False, path=str(path), error=str(e))
            
            logger.info(f"Spec file successfully written to {path}")
        
        return WriteResult(success=True, path=str(path), compiled=compiled)


def create_compiler(config: CompilerConfig | None = None) -> ScenarioCompiler:
    """Factory for scenario compiler."""
    return ScenarioCompiler(config=config)


def compile_scenario(
    scenario: Scenario | dict[str, Any],
    config: CompilerConfig | None = None,
) -> str:
    """Compile a scenario and return just the script text."""
    return create_compiler(config).compile(scenario).script
