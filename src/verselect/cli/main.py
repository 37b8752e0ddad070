"""Command-line interface for verselect."""

from pathlib import Path
from typing import Annotated

import typer

from ..config import VerselectConfig, load_config
from ..exceptions import ConfigError, InvalidVersionError
from ..selection import SelectionChecker
from ..version import Version, sort_versions
from ._helpers import (
    console,
    print_error,
    print_success,
    ranges_table,
    setup_logging,
    version_table,
)

app = typer.Typer(help="Parse versions and match them against version selections")

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (verselect.toml or pyproject.toml)",
    ),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option(..., "--verbose", help="Show debug logging")
    ] = False,
) -> None:
    """Parse versions and match them against version selections."""
    setup_logging(verbose)


def _load_config(config: Path | None) -> VerselectConfig:
    try:
        return load_config(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def _load_checker(selection: str, settings: VerselectConfig) -> SelectionChecker:
    if not selection:
        print_error("Version selection required")
        raise typer.Exit(1)
    if len(selection) > settings.max_selection_length:
        print_error(
            f"Version selection too long (maximum {settings.max_selection_length} "
            "characters)"
        )
        raise typer.Exit(1)

    checker = SelectionChecker(selection)
    if not checker.is_valid:
        print_error(f"Invalid version selection: '{selection}'")
        raise typer.Exit(1)
    return checker


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="Version string")],
) -> None:
    """Show how a version string is parsed."""
    try:
        parsed = Version.parse(version)
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    console.print(version_table(parsed))


@app.command()
def check(
    selection: Annotated[
        str, typer.Option(..., "--selection", "-s", help="Version selection")
    ],
    version: Annotated[
        str, typer.Option(..., "--version", "-v", help="Version to test")
    ],
    config: ConfigOption = None,
) -> None:
    """Check if a version falls within a version selection."""
    settings = _load_config(config)
    checker = _load_checker(selection, settings)

    try:
        parsed = Version.parse(version)
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if checker.contains(parsed):
        print_success(f"{parsed} is within the selection")
        console.print(f"[dim]Selection covers: {checker.describe()}[/dim]")
        raise typer.Exit(0)

    print_error(f"{parsed} is not within the selection")
    console.print(f"[dim]Selection covers: {checker.describe()}[/dim]")
    raise typer.Exit(1)


@app.command()
def ranges(
    selection: Annotated[str, typer.Argument(..., help="Version selection")],
    config: ConfigOption = None,
) -> None:
    """List the version ranges a selection covers."""
    settings = _load_config(config)
    checker = _load_checker(selection, settings)

    console.print(ranges_table(checker))
    console.print(f"\n[dim]Total: {len(checker)} ranges[/dim]")


@app.command()
def sort(
    versions: Annotated[list[str], typer.Argument(..., help="Versions to sort")],
    descending: Annotated[
        bool | None,
        typer.Option(
            ...,
            "--descending/--ascending",
            help="Sort newest first (default from config)",
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Sort versions from oldest to newest."""
    settings = _load_config(config)
    if descending is None:
        descending = settings.descending

    try:
        ordered = sort_versions(versions, descending=descending)
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    for version in ordered:
        console.print(str(version))


if __name__ == "__main__":
    app()
