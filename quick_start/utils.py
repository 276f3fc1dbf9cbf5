"""Shared utility functions for create-quick-start.

Provides JSON serialisation, awaitable file-system helpers, and Rich-based
terminal output.  File-system helpers never swallow errors: whatever the
operating system raises reaches the caller unchanged.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def to_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise data as pretty-printed JSON (2-space indent, no trailing newline)."""
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def make_dir(path: str | Path) -> Path:
    """Create a single directory, failing if it already exists.

    Parents are *not* created, so a missing parent surfaces as
    ``FileNotFoundError``.

    Raises:
        FileExistsError: If *path* already exists.
    """
    dir_path = Path(path)
    await asyncio.to_thread(dir_path.mkdir)
    return dir_path


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8 in a worker thread.

    The parent directory must already exist.
    """
    file_path = Path(path)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")
    return file_path


def is_within(path: Path, root: Path) -> bool:
    """Return ``True`` if *path* lies strictly inside *root*."""
    resolved_root = root.resolve()
    resolved = path.resolve()
    return resolved != resolved_root and resolved_root in resolved.parents


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    out: Optional[Console] = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print to. Defaults to the module console.
    """
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_success(message: str, out: Optional[Console] = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_info(message: str, out: Optional[Console] = None) -> None:
    """Print a blue informational message."""
    (out or console).print(f"[blue]{message}[/blue]")


def print_error(message: str, out: Optional[Console] = None) -> None:
    """Print a red error message to standard error."""
    (out or err_console).print(f"[bold red]{message}[/bold red]")
