"""Output helpers for the CLI."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..selection import SelectionChecker
from ..version import Version

console = Console()


def setup_logging(verbose: bool) -> None:
    """Configure logging for a CLI run."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def version_table(version: Version) -> Table:
    """Build a table showing the parts of a version."""
    table = Table(title=f"Version {version}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Major", str(version.major))
    table.add_row("Minor", str(version.minor))
    table.add_row("Patch", str(version.patch))
    if version.is_pre_release:
        table.add_row("Pre-release", version.pre_release_kind.name.lower())
        table.add_row("Pre-release number", str(version.pre_release_num))
    else:
        table.add_row("Pre-release", "none")
    table.add_row("Ordering key", str(version.ordering_key))
    return table


def ranges_table(checker: SelectionChecker) -> Table:
    """Build a table listing the ranges of a selection."""
    table = Table(title=f"Selection {checker.selection}")
    table.add_column("#", style="dim")
    table.add_column("Minimum", style="cyan")
    table.add_column("Maximum", style="cyan")
    table.add_column("Minimum key", style="green")
    table.add_column("Maximum key", style="green")

    for index, range_set in enumerate(checker.ranges, start=1):
        table.add_row(
            str(index),
            str(range_set.min_version),
            str(range_set.max_version),
            str(range_set.min_key),
            str(range_set.max_key),
        )
    return table
