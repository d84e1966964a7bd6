from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from dualmode.domain.models import OutputRecord


def render_json(record: OutputRecord) -> str:
    """Indented JSON with the category as its string value."""
    return record.model_dump_json(indent=2)


def render_table(record: OutputRecord) -> Table:
    """
    Render a record as a two-column rich table, with detail fields nested
    under a dotted key.
    """
    table = Table(
        title=f"{record.text}",
        box=box.ROUNDED,
        caption=f"Built at {record.timestamp}",
    )
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("timestamp", record.timestamp)
    table.add_row("category", record.category.value)
    table.add_row("detail.name", record.detail.name)
    table.add_row("detail.power", record.detail.power)
    table.add_row("detail.level", str(record.detail.level))
    return table


def print_record(
    record: OutputRecord,
    output_format: str = "json",
    console: Optional[Console] = None,
) -> None:
    """
    Print a record to stdout as JSON or as a table.
    """
    console = console or Console()
    if output_format == "table":
        console.print(render_table(record))
    else:
        # Plain write keeps the JSON free of rich markup and wrapping.
        console.file.write(render_json(record) + "\n")


__all__ = ["print_record", "render_json", "render_table"]
