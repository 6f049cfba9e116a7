"""Shared utility functions for diagram_ast.

Provides diagram file reading, JSON output, and Rich-based console
reporting. The parser core never prints; everything user-facing goes
through the module-level ``console`` here.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from diagram_ast.parser.models import ClassDef

console = Console()

DIAGRAM_SUFFIXES = (".mmd", ".mermaid", ".md", ".markdown", ".txt", "")


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_text_file(path: str | Path) -> str:
    """Read a diagram file as UTF-8 text.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is not one of ``DIAGRAM_SUFFIXES``.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Diagram file not found: {path}")
    if file_path.suffix.lower() not in DIAGRAM_SUFFIXES:
        raise ValueError(f"Expected a diagram or text file, got: {file_path.suffix}")
    return file_path.read_text(encoding="utf-8")


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically. The write runs in a
    thread-pool executor so it does not block the event loop.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False, default=str)

    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, file_path.write_text, content, "utf-8")


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
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_class_table(result: dict[str, "ClassDef"]) -> None:
    """Print one table per class listing its attributes and functions."""
    for name in sorted(result):
        class_def = result[name]
        table = Table(title=name, show_header=True, header_style="bold cyan")
        table.add_column("Member", no_wrap=True)
        table.add_column("Kind", style="dim")
        table.add_column("Type")

        for attribute in class_def.attributes:
            table.add_row(attribute.name, "attribute", str(attribute.data_type))
        for function in class_def.functions:
            table.add_row(f"{function.name}()", "function", str(function.return_type))

        console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
