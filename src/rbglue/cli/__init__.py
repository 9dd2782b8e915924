"""
CLI layer for rbglue.

Provides a Typer application whose commands delegate to
``rbglue.autoimport`` and ``rbglue.implementors``. This package handles
only terminal transport: argument parsing, coloured output, and tables.

Entry point::

    rbglue --help
"""

from rbglue.cli.app import app

__all__ = ["app"]
