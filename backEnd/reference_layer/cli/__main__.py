"""
CLI for reference layer.

Commands:
    check   - Load a reference.config and report invalid lines
    show    - Look up one reference system
    list    - List all loaded references
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

app = typer.Typer(
    name="reference-layer",
    help="Basis Reference Layer - reference.config loading and lookup",
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Configure logging for all commands.
    """
    from pydantic import ValidationError

    from ..config.settings import get_settings

    try:
        settings = get_settings()
    except ValidationError as e:
        rprint(f"[red]Invalid settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load(file: Optional[Path]):
    """Load a context from --file or the configured path, exiting on failure."""
    from ..src.context import ReferenceContext, load_reference_config
    from ..src.errors import ReferenceConfigLoadError

    context = ReferenceContext()
    try:
        result = load_reference_config(context, path=file)
    except ReferenceConfigLoadError as e:
        rprint(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(1)
    return context, result


@app.command()
def check(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="reference.config path (default: REFERENCE_CONFIG_FILE or packaged file)"),
    strict: bool = typer.Option(False, "--strict", help="Exit with an error if any line is invalid"),
):
    """
    Load a reference.config and report what was loaded.

    Examples:
        # Check the configured file
        reference-layer check

        # Check a specific file, failing on invalid lines
        reference-layer check --file ./reference.config --strict
    """
    context, result = _load(file)

    rprint(f"\n[bold]Source:[/bold] {escape(result.source)}")
    rprint(f"  Lines read: {result.lines_read}")
    rprint(f"  Skipped (blank/comment): {result.lines_skipped}")
    rprint(f"  Added: {result.references_added}")
    rprint(f"  Duplicates: {result.duplicates}")
    rprint(f"  Invalid: {result.num_invalid}")

    if result.has_errors():
        table = RichTable(title="Invalid Lines")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Text")

        for invalid in result.invalid_lines:
            table.add_row(str(invalid.line_number), escape(invalid.text))

        console.print(table)

        if strict:
            raise typer.Exit(1)
    else:
        rprint("[green]All directives valid[/green]")


@app.command()
def show(
    name: str = typer.Argument(..., help="Reference system name (case-insensitive)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="reference.config path"),
):
    """
    Show a single reference system.
    """
    from ..src.context import get_reference

    context, _ = _load(file)
    reference = get_reference(context, name)

    if reference is None:
        rprint(f"[red]Reference not found: {escape(name)}[/red]")
        raise typer.Exit(1)

    rprint(f"[bold]{reference.system}[/bold]: {escape(reference.url or '-')}")


@app.command("list")
def list_references(
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="reference.config path"),
):
    """
    List all reference systems.
    """
    context, _ = _load(file)

    if context.store.count() == 0:
        rprint("[yellow]No references found[/yellow]")
        return

    table = RichTable(title=f"References ({context.store.count()})")
    table.add_column("System", style="cyan")
    table.add_column("URL")

    for reference in sorted(context.store, key=lambda r: r.system):
        table.add_row(reference.system, escape(reference.url or "-"))

    console.print(table)


if __name__ == "__main__":
    app()
