"""
Build a sample output record from the command line.

Run directly with a category to print one record:

    python scripts/new_output_record.py Hero
    python scripts/new_output_record.py champion --format table

Loading this file into another module (the test harness does this), or
running it with no arguments, only defines the functions below. Nothing is
built until `new_output_record` is called.
"""

from __future__ import annotations

import sys
from typing import List, Optional

import typer

from dualmode.builder import build
from dualmode.config import get_settings
from dualmode.domain.models import Category, OutputRecord
from dualmode.errors import InvalidCategory
from dualmode.gate import EntryPointGate, GateAction, InvocationContext
from dualmode.main import resolve_format
from dualmode.reporter import print_record
from dualmode.utils.logging import configure_logging, get_logger

PROG_NAME = "new-output-record"

log = get_logger(__name__)

app = typer.Typer(help="Build one sample output record.", add_completion=False)


def new_output_record(category: Category | str) -> OutputRecord:
    """Build a record for `category`. Raises InvalidCategory on a bad value."""
    return build(category)


@app.command()
def main(
    category: str = typer.Argument(
        ...,
        help=f"Record category ({', '.join(Category.allowed())}).",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: json or table (default from OUTPUT_FORMAT).",
    ),
) -> None:
    fmt = resolve_format(output_format)
    try:
        record = new_output_record(category)
    except InvalidCategory as exc:
        raise typer.BadParameter(str(exc), param_hint="CATEGORY") from exc
    print_record(record, output_format=fmt)


def run(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for a top-level process.

    Returns 0 when no arguments were given. Otherwise the typer app runs and
    exits the process with its own status.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    args = sys.argv[1:] if argv is None else argv
    gate = EntryPointGate(lambda cli_args: app(args=cli_args, prog_name=PROG_NAME))
    decision = gate.evaluate(InvocationContext(top_level=True, args=tuple(args)))
    if decision is GateAction.DEFINE_ONLY:
        log.debug("No arguments supplied; definitions only")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
