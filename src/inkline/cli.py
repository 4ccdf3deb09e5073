"""Command-line interface for Inkline."""

import logging
import unicodedata
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from inkline import __version__
from inkline.config import get_settings
from inkline.dom.nodes import element
from inkline.exceptions import InklineError
from inkline.html.classify import (
    is_block_type,
    is_control_character,
    is_linebreaking_node,
    is_list_container,
    is_text_level_semantic_type,
    is_void_type,
)
from inkline.html.whitespace import is_whitespaces, is_zero_width_characters

app = typer.Typer(
    name="inkline",
    help="Inspect how Inkline classifies tags and characters when rendering rich text.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Inkline v{__version__}")
        raise typer.Exit()


def _mark(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def decode_escapes(value: str) -> str:
    """Turn ``\\u200b`` style escapes typed on the command line into characters."""
    try:
        return value.encode("latin-1", "backslashreplace").decode("unicode_escape")
    except UnicodeDecodeError as e:
        raise InklineError(f"Invalid escape sequence in {value!r}: {e.reason}") from e


def describe_character(char: str) -> str:
    """Human readable code point and name of a character."""
    name = unicodedata.name(char, "<unnamed>")
    return f"U+{ord(char):04X} {name}"


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Inkline rendering model tools.

    Examples:

        inkline classify p br span ul

        inkline chars "a\\u200b\\u00a0b"
    """
    settings = get_settings()
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def classify(
    tags: list[str] = typer.Argument(
        ...,
        help="Tag names to classify (case-insensitive)",
    ),
) -> None:
    """Show how tag names are classified."""
    table = Table(title="Tag classification")
    table.add_column("Tag", style="bold")
    table.add_column("Block")
    table.add_column("Void")
    table.add_column("Text-level")
    table.add_column("Line-breaking")
    table.add_column("List")

    for tag in tags:
        # Detached elements, so classification comes from the static tables
        node = element(tag)
        table.add_row(
            node.name,
            _mark(is_block_type(node)),
            _mark(is_void_type(node)),
            _mark(is_text_level_semantic_type(node)),
            _mark(is_linebreaking_node(node)),
            _mark(is_list_container(node)),
        )
    console.print(table)


@app.command()
def chars(
    value: str = typer.Argument(
        ...,
        help="Text to inspect; \\uXXXX escapes are accepted",
    ),
) -> None:
    """Show whitespace, zero-width and control classification per character."""
    try:
        decoded = decode_escapes(value)
    except InklineError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Character classification")
    table.add_column("Character")
    table.add_column("Whitespace")
    table.add_column("Zero-width")
    table.add_column("Control")

    for char in decoded:
        table.add_row(
            describe_character(char),
            _mark(is_whitespaces(char)),
            _mark(is_zero_width_characters(char)),
            _mark(is_control_character(char)),
        )
    console.print(table)
    if decoded and is_whitespaces(decoded):
        console.print("[yellow]Whitespace only:[/yellow] collapsible unless white-space preserves it")


if __name__ == "__main__":
    app()
