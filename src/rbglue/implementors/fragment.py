"""Implementor fragment rendering and parsing.

Stability: stable
Since: 0.1.0
Tags: implementors, javascript, documentation

A fragment is the script a documentation page loads for one trait::

    (function() {var implementors = {};
    implementors["log"] = [{"text":"impl FromStr for Level","synthetic":false,"types":[]}];
    if (window.register_implementors) {window.register_implementors(implementors);} else {window.pending_implementors = implementors;}})()

One line per crate, crates in sorted order, compact JSON, no trailing
newline. Fragments live at ``implementors/<module path>/trait.<Name>.js``
under the documentation root; each crate that implements the trait
rewrites only its own line.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from pathlib import Path

from rbglue.core.errors import FragmentParseError
from rbglue.core.logging import get_logger
from rbglue.implementors.model import Implementor, ImplementorTable

logger = get_logger(__name__)

REGISTER_HOOK = "register_implementors"
PENDING_SLOT = "pending_implementors"

FRAGMENT_HEADER = "(function() {var implementors = {};"
FRAGMENT_FOOTER = (
    f"if (window.{REGISTER_HOOK}) {{window.{REGISTER_HOOK}(implementors);}} "
    f"else {{window.{PENDING_SLOT} = implementors;}}}})()"
)

_ENTRY_RE = re.compile(r'^implementors\[(?P<crate>"(?:[^"\\]|\\.)*")\] = (?P<body>\[.*\]);$')


def _compact(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def render_fragment(table: ImplementorTable) -> str:
    """Render a table as fragment text."""
    lines = [FRAGMENT_HEADER]
    for crate, items in table.items():
        body = _compact([impl.to_dict() for impl in items])
        lines.append(f"implementors[{_compact(crate)}] = {body};")
    lines.append(FRAGMENT_FOOTER)
    return "\n".join(lines)


def parse_fragment(text: str) -> ImplementorTable:
    """Parse fragment text back into a table.

    The header and footer lines are optional so that hand-trimmed snippets
    still load; any other line must be a well-formed crate entry.

    Raises:
        FragmentParseError: On the first malformed line.
    """
    table = ImplementorTable()
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line in (FRAGMENT_HEADER, FRAGMENT_FOOTER):
            continue

        match = _ENTRY_RE.match(line)
        if match is None:
            raise FragmentParseError(f"unrecognized fragment line {lineno}", line=lineno)

        try:
            crate = json.loads(match.group("crate"))
            body = json.loads(match.group("body"))
            items = [Implementor.from_dict(item) for item in body]
        except (ValueError, KeyError, TypeError) as exc:
            raise FragmentParseError(
                f"malformed implementor entry on line {lineno}: {exc}",
                line=lineno,
                cause=exc,
            ) from exc

        table.replace(crate, items)
    return table


def fragment_path(root: Path, trait_path: str) -> Path:
    """Location of a trait's fragment under a documentation root.

    ``core::str::FromStr`` -> ``<root>/implementors/core/str/trait.FromStr.js``
    """
    segments = [part for part in trait_path.split("::") if part]
    if not segments:
        raise ValueError(f"invalid trait path: {trait_path!r}")
    *modules, name = segments
    return Path(root, "implementors", *modules, f"trait.{name}.js")


def read_fragment(path: Path) -> ImplementorTable:
    """Load a fragment file; a missing file is an empty table."""
    path = Path(path)
    if not path.is_file():
        return ImplementorTable()
    try:
        return parse_fragment(path.read_text(encoding="utf-8"))
    except FragmentParseError as exc:
        raise exc.with_context(path=str(path))


def write_fragment(path: Path, table: ImplementorTable) -> Path:
    """Write a table to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_fragment(table), encoding="utf-8")
    return path


def update_fragment(
    path: Path,
    crate: str,
    implementors: Iterable[Implementor],
) -> ImplementorTable:
    """Replace one crate's entries in the fragment at ``path``.

    Other crates' lines are preserved. Passing no implementors removes the
    crate.

    Returns:
        The table that was written.
    """
    table = read_fragment(path)
    table.replace(crate, implementors)
    write_fragment(path, table)
    logger.info(
        "fragment_updated",
        path=str(path),
        crate=crate,
        crates=len(table),
    )
    return table


__all__ = [
    "REGISTER_HOOK",
    "PENDING_SLOT",
    "FRAGMENT_HEADER",
    "FRAGMENT_FOOTER",
    "render_fragment",
    "parse_fragment",
    "fragment_path",
    "read_fragment",
    "write_fragment",
    "update_fragment",
]
