"""Lint command implementation."""

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..linter import lint_file
from ..rules import RULE_EXPLANATIONS, RULES, LintResult, RuleConfigError, load_options
from ..rules.no_attribute_string_literals import RULE_ID


def run_lint(
    paths: list[Path],
    config_path: Path | None = None,
    output_json: bool = False,
    rule_id: str = RULE_ID,
) -> int:
    """Lint ESTree JSON files.

    Args:
        paths: ESTree JSON documents to lint
        config_path: Optional TOML/JSON file holding the rule's `only` / `ignore` options
        output_json: Output results as JSON instead of human-readable
        rule_id: Registered rule to run

    Returns:
        Exit code (0 = clean, 1 = violations found, 2 = configuration or input error)
    """
    console = Console(stderr=True)

    try:
        options = load_options(config_path) if config_path else None
    except (OSError, RuleConfigError) as e:
        console.print(f"Invalid rule configuration: {e}", style="bold red", markup=False)
        return 2

    rule = RULES[rule_id](options)

    results: list[LintResult] = []
    for path in paths:
        console.print(f"Linting {path}...", style="dim", markup=False, soft_wrap=True)
        try:
            results.extend(lint_file(path, rule))
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError.
            console.print(f"Cannot read syntax tree {path}: {e}", style="bold red", markup=False)
            return 2

    if output_json:
        _output_json(results, files=len(paths))
    else:
        _print_human_output(console, results, files=len(paths))

    return 1 if results else 0


def _result_to_dict(result: LintResult) -> dict:
    """Convert LintResult to JSON-serializable dict."""
    return {
        "rule": result.rule,
        "file": str(result.file) if result.file else None,
        "line": result.line,
        "column": result.column,
        "message": result.message,
    }


def _output_json(results: list[LintResult], *, files: int) -> None:
    output = {
        "violations": [_result_to_dict(r) for r in results],
        "summary": {
            "files": files,
            "violations": len(results),
        },
    }
    print(json.dumps(output, indent=2))


def _print_human_output(console: Console, results: list[LintResult], *, files: int) -> None:
    for r in results:
        console.print(str(r), style="bold red", markup=False, soft_wrap=True)

    console.print()
    if results:
        console.print(f"✗ {len(results)} violation(s) in {files} file(s)", style="bold red")
    else:
        console.print(f"✓ No violations in {files} file(s)", style="bold green")


def run_list_rules() -> int:
    """Print the registered rules."""
    console = Console()
    table = Table(title="attrlit rules")
    table.add_column("Rule", style="bold", no_wrap=True)
    table.add_column("Description")
    for rule_id in sorted(RULES):
        table.add_row(rule_id, RULE_EXPLANATIONS.get(rule_id, ""))
    console.print(table)
    return 0
