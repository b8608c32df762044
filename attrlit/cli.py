"""CLI entrypoint for attrlit."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="attrlit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """attrlit - Flag raw string literals in JSX attributes.

    Reads ESTree JSON produced by an external JavaScript parser and reports
    attributes that should use design-system tokens instead.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML or JSON file with the rule's `only` / `ignore` options",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
def lint(files: tuple[Path, ...], config_path: Path | None, output_json: bool) -> None:
    """Lint ESTree JSON documents.

    Examples:

        attrlit lint build/ast/Button.json

        attrlit lint build/ast/*.json --config attrlit.toml --json
    """
    from .commands.lint import run_lint

    exit_code = run_lint(list(files), config_path, output_json)
    sys.exit(exit_code)


@cli.command("rules")
def list_rules() -> None:
    """List the available rules."""
    from .commands.lint import run_list_rules

    sys.exit(run_list_rules())


if __name__ == "__main__":
    cli()
