"""Implementor tables for generated trait documentation.

Stability: stable
Since: 0.1.0
Tags: implementors, documentation

Builds, reads and updates the per-trait fragments that list which crates
implement a trait, and models the page-side publish slot they hand their
table to.

Usage::

    from rbglue.implementors import Implementor, fragment_path, update_fragment

    path = fragment_path(Path("target/doc"), "core::str::FromStr")
    update_fragment(path, "log", [Implementor.from_signature("impl FromStr for Level")])
"""

from __future__ import annotations

from .fragment import (
    PENDING_SLOT,
    REGISTER_HOOK,
    fragment_path,
    parse_fragment,
    read_fragment,
    render_fragment,
    update_fragment,
    write_fragment,
)
from .model import Implementor, ImplementorTable
from .registry import ImplementorSlot

__all__ = [
    "Implementor",
    "ImplementorTable",
    "ImplementorSlot",
    "REGISTER_HOOK",
    "PENDING_SLOT",
    "render_fragment",
    "parse_fragment",
    "fragment_path",
    "read_fragment",
    "write_fragment",
    "update_fragment",
]
