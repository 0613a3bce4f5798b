"""
cygen command line.

Usage:
    cygen compile <scenario.json> [options]
    cygen check <scenario.json>
    cygen templates

Examples:
    # Compile into the current directory (<scenario-name>.spec.ts)
    cygen compile login.json

    # Compile into a folder, verbose
    cygen compile suite.json -o cypress/integration -v

    # Print the script instead of writing it
    cygen compile login.json --stdout
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from cygen.config import CompilerConfig
from cygen.errors import CygenError
from cygen.observability import configure_logging
from cygen.output import spec_filename
from cygen.patterns import get_all_families
from cygen.schemas import Scenario, load_scenarios
from cygen.validation import create_statement_validator
from cygen.compiler import create_compiler


def _read_scenarios(path: str) -> list[Scenario]:
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")
    with open(source, encoding="utf-8") as f:
        data = json.load(f)
    return load_scenarios(data)


def _output_path(output: str | None, scenario: Scenario, many: bool) -> Path:
    if output is None:
        return Path(spec_filename(scenario.name))
    target = Path(output)
    if many or target.is_dir() or output.endswith(("/", "\\")):
        return target / spec_filename(scenario.name)
    return target


def cmd_compile(args: argparse.Namespace) -> int:
    scenarios = _read_scenarios(args.scenario)
    compiler = create_compiler(CompilerConfig.from_env())
    failures = 0

    for scenario in scenarios:
        try:
            if args.stdout:
                print(compiler.compile(scenario).script, end="")
                continue

            path = _output_path(args.output, scenario, many=len(scenarios) > 1)
            result = compiler.compile_to_file(scenario, path)
        except CygenError as e:
            failures += 1
            print(f"[FAIL] {scenario.name}: {e}")
            continue

        if not result.success:
            failures += 1
            print(f"[FAIL] {scenario.name}: {result.error}")
            continue

        print(f"[PASS] {scenario.name} -> {result.path}")
        if args.verbose:
            for warning in result.compiled.warnings:
                print(f"  - Unresolved: {warning.text}")

    return 1 if failures else 0


def cmd_check(args: argparse.Namespace) -> int:
    scenarios = _read_scenarios(args.scenario)
    validator = create_statement_validator(CompilerConfig.from_env().diagnostic_threshold)
    all_valid = True

    for scenario in scenarios:
        for section, statement in scenario.statements():
            result = validator.check(statement)
            if result.valid:
                continue
            all_valid = False
            print(f"[FAIL] {scenario.name} ({section.value}): {statement}")
            for error in result.errors:
                hint = f' (did you mean "{error.suggestion.template}"?)' if error.suggestion else ""
                print(f"  - {error.message}{hint}")

    if all_valid:
        print(f"[PASS] {len(scenarios)} scenario(s) valid")
        return 0
    return 1


def cmd_templates(args: argparse.Namespace) -> int:
    for family in get_all_families():
        print(f"{family.tag.value}: {family.description}")
        for template in family.templates():
            print(f"  {template}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cygen",
        description="Compile given/when/then scenarios into Cypress spec files",
    )
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit logs as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    compile_parser = sub.add_parser("compile", help="Compile scenarios to spec files")
    compile_parser.add_argument("scenario", help="JSON file with one scenario or a list")
    compile_parser.add_argument("-o", "--output",
                                help="Output file, or directory when several scenarios")
    compile_parser.add_argument("--stdout", action="store_true",
                                help="Print scripts instead of writing files")
    compile_parser.add_argument("-v", "--verbose", action="store_true",
                                help="Verbose output")
    compile_parser.set_defaults(handler=cmd_compile)

    check_parser = sub.add_parser("check", help="Validate placeholders only")
    check_parser.add_argument("scenario", help="JSON file with one scenario or a list")
    check_parser.set_defaults(handler=cmd_check, verbose=False)

    templates_parser = sub.add_parser("templates", help="List known templates")
    templates_parser.set_defaults(handler=cmd_templates, verbose=False)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        json_format=args.json_logs,
    )

    try:
        return args.handler(args)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        return 1
    except (CygenError, ValueError) as e:
        print(f"[ERROR] Compilation failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
