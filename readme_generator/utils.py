"""Shared utility functions for the README Generator.

Provides JSON loading, timestamped file naming and Rich-based console
reporting used by every stage of the wizard.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

FILENAME_PATTERN = "README-{timestamp}.md"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level JSON value is not an object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: expected a JSON object, got {type(data).__name__}")
    return data


# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------


def timestamped_filename(moment: datetime) -> str:
    """Return the README file name for *moment*.

    Minute resolution only, so two runs within the same minute share a name.

    Examples::

        timestamped_filename(datetime(2024, 5, 1, 9, 7)) -> "README-2024-05-01 09:07.md"
    """
    return FILENAME_PATTERN.format(timestamp=moment.strftime(TIMESTAMP_FORMAT))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
