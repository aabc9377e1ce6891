"""check-break CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from checkbreak import __version__
from checkbreak.config import DEFAULT_CONFIG_FILENAME
from checkbreak.engine.pipeline import Break
from checkbreak.report import format_text
from checkbreak.schema import export_json_schema

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0  # No compatibility break
EXIT_BREAKS = 1  # Potential breaks found
EXIT_ERROR = 2  # Something went wrong


@click.group()
@click.version_option(__version__, "--version", "-v")
def main() -> None:
    """check-break — Detects public signature changes that break callers between two git references."""


@main.command()
@click.argument("start_point")
@click.argument("end_point", required=False, default="HEAD")
@click.option(
    "--path",
    "working_path",
    default=".",
    help="Repository path (default: current directory).",
)
@click.option(
    "--config",
    "config_filename",
    default=DEFAULT_CONFIG_FILENAME,
    help=f"Configuration file name inside the repository (default: {DEFAULT_CONFIG_FILENAME}).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--show-ignored",
    is_flag=True,
    default=False,
    help="List changed files whose language is not supported.",
)
def check(
    start_point: str,
    end_point: str,
    working_path: str,
    config_filename: str,
    fmt: str,
    show_ignored: bool,
) -> None:
    """Check public signatures changed between two references.

    START_POINT: reference the analysis starts from (e.g. v1.2.0).
    END_POINT: reference it ends at (default: HEAD).

    \b
    Exit codes:
      0 — No compatibility break
      1 — Potential breaks found (read the output)
      2 — Error
    """
    try:
        b = Break.init(working_path, start_point, end_point, config_filename)
        output = b.analyze()

        if fmt == "json":
            click.echo(output.model_dump_json(indent=2))
        else:
            click.echo(format_text(output, show_ignored=show_ignored))

        sys.exit(EXIT_BREAKS if output.has_breaks else EXIT_SUCCESS)

    except SystemExit:
        raise
    except Exception as exc:
        logger.debug("CLI error", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)


@main.command()
def schema() -> None:
    """Print the JSON schema of the --format json output."""
    click.echo(export_json_schema())
