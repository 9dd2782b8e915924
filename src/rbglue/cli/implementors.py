"""
CLI: ``rbglue implementors`` — inspect and update implementor fragments.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.table import Table

from rbglue.cli.utils import console, fail
from rbglue.core.errors import GlueError
from rbglue.implementors.fragment import fragment_path, read_fragment, update_fragment
from rbglue.implementors.model import Implementor

app = typer.Typer(no_args_is_help=True)


# ── rbglue implementors show ─────────────────────────────────────────


@app.command("show")
def show_cmd(
    path: Path = typer.Argument(
        ...,
        help="Fragment file, e.g. implementors/core/str/trait.FromStr.js.",
        exists=True,
        dir_okay=False,
    ),
    json_out: bool = typer.Option(False, "--json", "-j", help="Output as JSON."),
) -> None:
    """List the crates and implementations recorded in a fragment."""
    try:
        table = read_fragment(path)
    except GlueError as exc:
        fail(exc)

    if json_out:
        typer.echo(json.dumps(table.to_dict(), indent=2, ensure_ascii=False))
        return

    if not len(table):
        console.print("[dim]No items.[/dim]")
        return

    out = Table(title=str(path), show_lines=False, pad_edge=False)
    out.add_column("crate", style="cyan")
    out.add_column("implementation", overflow="fold")
    out.add_column("synthetic", justify="center")
    for crate, items in table.items():
        for impl in items:
            out.add_row(crate, impl.signature, "yes" if impl.synthetic else "")
    console.print(out)


# ── rbglue implementors add ──────────────────────────────────────────


@app.command("add")
def add_cmd(
    root: Path = typer.Argument(..., help="Documentation root directory.", file_okay=False),
    trait_path: str = typer.Argument(..., help="Trait path, e.g. core::str::FromStr."),
    crate: str = typer.Argument(..., help="Crate whose entries are replaced."),
    signatures: list[str] = typer.Argument(
        ...,
        help="Implementation signatures, e.g. 'impl FromStr for Level'.",
    ),
    synthetic: bool = typer.Option(False, "--synthetic", help="Mark entries as synthetic."),
) -> None:
    """Replace one crate's entries in a trait's fragment.

    Example:
        rbglue implementors add target/doc core::str::FromStr log 'impl FromStr for Level'
    """
    try:
        path = fragment_path(root, trait_path)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    implementors = [Implementor.from_signature(sig, synthetic=synthetic) for sig in signatures]
    try:
        table = update_fragment(path, crate, implementors)
    except GlueError as exc:
        fail(exc)

    typer.echo(f"Written to {path} ({len(table)} crates)")


# ── rbglue implementors path ─────────────────────────────────────────


@app.command("path")
def path_cmd(
    root: Path = typer.Argument(..., help="Documentation root directory."),
    trait_path: str = typer.Argument(..., help="Trait path, e.g. core::str::FromStr."),
) -> None:
    """Print where a trait's fragment lives under a documentation root."""
    try:
        typer.echo(str(fragment_path(root, trait_path)))
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
