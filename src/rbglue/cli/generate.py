"""
CLI: ``rbglue generate`` — render glue for one vendored package.

The four positional arguments are optional at the parser level so that a
missing one is reported with the generator's own message
(``must provide a library base path`` ...) rather than a usage error.
"""

from __future__ import annotations

from pathlib import Path

import typer

from rbglue.autoimport.generator import GlueGenerator
from rbglue.cli.utils import console, fail, load_settings, setup_logging
from rbglue.core.errors import GlueError


def generate_cmd(
    base: str | None = typer.Argument(
        None,
        help="Library base path the package is required from.",
        show_default=False,
    ),
    package: str | None = typer.Argument(
        None,
        help="Library to import, e.g. ostruct.",
        show_default=False,
    ),
    out_file: str | None = typer.Argument(
        None,
        help="Path of the generated glue file.",
        show_default=False,
    ),
    sources: str | None = typer.Argument(
        None,
        help="Comma-separated list of the package's source files.",
        show_default=False,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML settings file.",
        exists=True,
        dir_okay=False,
    ),
    interpreter: str | None = typer.Option(
        None, "--interpreter", help="Interpreter used to run the helper script."
    ),
    helper: Path | None = typer.Option(
        None, "--helper", help="Helper script printing Name,kind lines."
    ),
    template_dir: Path | None = typer.Option(
        None, "--template-dir", help="Directory containing the glue template."
    ),
    template: str | None = typer.Option(
        None, "--template", "-t", help="Template file name inside the template directory."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Seconds to wait for constant discovery."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON."),
) -> None:
    """Generate glue for a package from its discovered constants.

    Example:
        rbglue generate vendor/ruby/lib ostruct src/extn/ostruct.rs vendor/ruby/lib/ostruct.rb
    """
    try:
        settings = load_settings(
            config,
            interpreter=interpreter,
            helper_script=helper,
            template_dir=template_dir,
            template_name=template,
            timeout_seconds=timeout,
        )
        setup_logging(settings, verbose=verbose, json_logs=True if json_logs else None)
        result = GlueGenerator(settings=settings).generate(base, package, out_file, sources)
    except GlueError as exc:
        fail(exc)

    console.print(
        f"Wrote [cyan]{result.out_file}[/cyan] "
        f"({len(result.constants)} constants, {len(result.sources)} sources, {result.size:,} bytes)",
        highlight=False,
        soft_wrap=True,
    )
