"""Shared utility functions for the CRUD generator.

Provides name-casing helpers used by the path resolver and the templates,
plus Rich-based console reporting.  All human-readable output of the
generator goes through the module-level ``console``.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def kebab_case(name: str) -> str:
    """Convert a display name to a lower-kebab-case directory name.

    * Lowercases the input.
    * Replaces every run of non-alphanumeric characters with one hyphen.
    * Strips leading/trailing hyphens.

    Examples::

        kebab_case("Channel Identities") -> "channel-identities"
        kebab_case("Purchase  Rebates!") -> "purchase-rebates"
    """
    result = re.sub(r"[^a-z0-9]+", "-", name.strip().lower())
    return result.strip("-")


def pascal_case(name: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``Some Thing`` to ``SomeThing``.

    Any character that cannot appear in an identifier separates words.
    """
    parts = re.split(r"[^A-Za-z0-9]+", name)
    return "".join(word[:1].upper() + word[1:].lower() for word in parts if word)


def camel_case(name: str) -> str:
    """Convert ``SOME_THING`` or ``some thing`` to ``someThing``."""
    pascal = pascal_case(name)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.042)  -> "42ms"
        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0ms"
    if seconds < 1:
        return f"{int(seconds * 1000)}ms"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, style: str = "bright_cyan") -> None:
    """Print a full-width rule with *title* centred in it."""
    console.print()
    console.print(Rule(f"[bold {style}] {title} [/bold {style}]", style=style))
    console.print()


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
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
