"""Command line interface for docsetgen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docsetgen.bundle.assembler import assemble_docset
from docsetgen.config import DocsetConfig
from docsetgen.errors import ConfigurationError, DocsetError
from docsetgen.ingestion.walker import walk_tree
from docsetgen.models import EntryKind


console = Console()
app = typer.Typer(help="docsetgen - package generated API documentation as a Dash/Zeal docset")


def _setup_logging(verbose: bool, quiet: bool = False) -> None:
    if verbose and quiet:
        raise ConfigurationError("cannot specify --quiet with --verbose")
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(exc: DocsetError) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=1)


@app.command()
def generate(
    source: Path = typer.Argument(
        ...,
        help="Root of the generated HTML documentation tree.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Directory receiving <name>.docset"),
    name: Optional[str] = typer.Option(None, "--name", help="Docset display name"),
    index: Optional[str] = typer.Option(None, "--index", help="Package whose index.html opens the docset"),
    platform_family: Optional[str] = typer.Option(
        None, "--platform-family", help="Docset identifier and search keyword"
    ),
    atomic: bool = typer.Option(False, "--atomic", help="Build in a staging directory and swap it in"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print warnings and errors"),
) -> None:
    """Build a docset from a generated documentation tree."""
    try:
        _setup_logging(verbose, quiet)
        config = DocsetConfig(
            source_dir=source,
            output_dir=output,
            name=name,
            index_package=index,
            platform_family=platform_family,
            atomic=atomic,
        )
        naming = config.resolve_naming()
        output_dir = config.resolve_output_dir(Path.cwd())

        if not quiet:
            console.print(f"Building docset [bold]{escape(naming.name)}[/bold] from {source}...")
        result = assemble_docset(
            config.source_dir,
            output_dir,
            naming.name,
            naming.index_package,
            naming.platform_family,
            atomic=config.atomic,
        )
    except DocsetError as exc:
        raise _fail(exc) from exc

    if not quiet:
        console.print(f"Indexed {result.stats.summary()}, copied {result.copied_files} files.")
        console.print(f"Docset successfully generated in [bold]{result.docset_path}[/bold]")


@app.command()
def entries(
    source: Path = typer.Argument(
        ...,
        help="Root of the generated HTML documentation tree.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
    kind: Optional[EntryKind] = typer.Option(None, "--kind", case_sensitive=False, help="Only show one kind"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum number of rows to display"),
) -> None:
    """List the entries a docset would contain, without writing anything."""
    try:
        found = walk_tree(source)
    except DocsetError as exc:
        raise _fail(exc) from exc

    if kind is not None:
        found = [entry for entry in found if entry.kind is kind]
    if not found:
        console.print("[yellow]No entries found.[/yellow]")
        return

    found.sort(key=lambda entry: (entry.name, entry.page_path.as_posix()))
    shown = found[:limit] if limit is not None else found

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Path")
    for entry in shown:
        table.add_row(escape(entry.name), entry.kind.value, escape(entry.page_path.as_posix()))

    console.print(table)
    console.print(f"{len(shown)} of {len(found)} entries shown.")
