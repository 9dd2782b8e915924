"""
Root Typer application for the rbglue CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

app = Typer(
    name="rbglue",
    help="rbglue — generate interpreter glue and documentation implementor tables.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from rbglue import __version__

        typer.echo(f"rbglue {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """rbglue CLI — auto-import glue and implementor fragments."""


# ── Sub-command registration ─────────────────────────────────────────────

from rbglue.cli.generate import generate_cmd  # noqa: E402
from rbglue.cli.implementors import app as implementors_app  # noqa: E402

app.command("generate")(generate_cmd)
app.add_typer(implementors_app, name="implementors", help="Implementor fragment tools.")
