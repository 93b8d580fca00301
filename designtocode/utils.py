"""Shared utility functions for design-to-code.

Provides JSON I/O, file-system helpers (recursive name search, text writes)
and Rich-based console reporting used by the generator and the CLI.
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def save_json(data: dict[str, Any] | list[Any], path: str | Path, *, compact: bool = False) -> Path:
    """Save data as JSON, pretty-printed unless *compact* is set.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    if compact:
        content = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    else:
        content = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    write_text(file_path, content)
    return file_path


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: Path, content: str) -> None:
    """Create parent dirs and write *content* as UTF-8."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def search_paths(root: str | Path, pattern: str) -> list[Path]:
    """Find every file or directory below *root* whose name matches *pattern*.

    The regex is applied with ``re.search`` to the basename only.  Results are
    returned in pre-order with siblings sorted by name; symbolic links to
    directories are reported but never descended into.

    Examples::

        search_paths(project, r"xcassets$")      -> [.../Assets.xcassets]
        search_paths(project, r"^project\\.yml\\.j2$")
    """
    root_path = Path(root)
    if not root_path.is_dir():
        return []

    regex = re.compile(pattern)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, followlinks=False):
        dirnames.sort()
        current = Path(dirpath)
        for name in sorted(dirnames + filenames):
            if regex.search(name):
                found.append(current / name)
    return sorted(found, key=lambda p: p.relative_to(root_path).parts)


def find_first(root: str | Path, name: str) -> Path | None:
    """Return the first path below *root* whose basename equals *name*."""
    matches = search_paths(root, f"^{re.escape(name)}$")
    return matches[0] if matches else None


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STAGE_NAMES: dict[int, str] = {
    1: "ASSEMBLE",
    2: "ASSETS",
    3: "SOURCES",
}

STAGE_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
}


def print_stage_header(stage: int, name: str | None = None) -> None:
    """Print a full-width rule with the stage number and name."""
    name = name or STAGE_NAMES.get(stage, "?")
    color = STAGE_COLORS.get(stage, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Stage {stage}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

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
