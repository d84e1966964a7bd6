from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from dualmode.builder import build
from dualmode.config import get_settings
from dualmode.domain.models import Category
from dualmode.errors import InvalidCategory, ScriptNotFound
from dualmode.harness import SetupContext, describe_script, locate_script
from dualmode.reporter import print_record
from dualmode.utils.logging import configure_logging

app = typer.Typer(help="Build sample output records and inspect dual-mode scripts.")


def resolve_format(output_format: Optional[str]) -> str:
    fmt = output_format or get_settings().output_format
    if fmt not in ("json", "table"):
        raise typer.BadParameter(
            f"'{fmt}' is not one of 'json', 'table'.", param_hint="--format"
        )
    return fmt


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


@app.command("build")
def build_command(
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
    """
    Build one record and print it.
    """
    fmt = resolve_format(output_format)
    try:
        record = build(category)
    except InvalidCategory as exc:
        raise typer.BadParameter(str(exc), param_hint="CATEGORY") from exc
    print_record(record, output_format=fmt)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"json_logs={settings.json_logs} | output={settings.output_format} "
        f"test_mode={settings.test_mode}"
    )


@app.command()
def inspect(
    path: Path = typer.Argument(..., help="Script to analyse."),
    test_mode: Optional[bool] = typer.Option(
        None,
        "--test-mode/--no-test-mode",
        help="Leave test scaffolding out of the listing (default from APP_TEST_MODE).",
    ),
) -> None:
    """
    List the functions a script defines, without running it.
    """
    try:
        located = locate_script(path)
    except ScriptNotFound as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    effective_test_mode = get_settings().test_mode if test_mode is None else test_mode
    names = describe_script(SetupContext(script_path=located, test_mode=effective_test_mode))
    if not names:
        typer.echo(f"No functions found in {located}")
        return
    for name in names:
        typer.echo(name)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
