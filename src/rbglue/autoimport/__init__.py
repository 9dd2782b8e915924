"""Auto-import glue generation for vendored interpreter libraries.

Stability: stable
Since: 0.1.0
Tags: autoimport, codegen

Turns a library base path, a package name and its source files into a
generated glue module: sources are normalized to module identifiers, the
package's constants are discovered by a helper subprocess, and a template
is rendered to the output file.

Usage::

    from rbglue.autoimport import generate_glue

    generate_glue("/vendor/ruby/lib", "ostruct", "out/ostruct.rs")
"""

from __future__ import annotations

from .constants import ConstantSpec, build_command, discover_constants, parse_constants
from .generator import GlueGenerator, GlueResult, generate_glue, validate_arguments
from .renderer import GlueRenderer, rust_ident, screaming_snake, struct_names
from .sources import normalize_source, parse_sources

__all__ = [
    "normalize_source",
    "parse_sources",
    "ConstantSpec",
    "build_command",
    "parse_constants",
    "discover_constants",
    "GlueRenderer",
    "rust_ident",
    "screaming_snake",
    "struct_names",
    "GlueResult",
    "GlueGenerator",
    "validate_arguments",
    "generate_glue",
]
