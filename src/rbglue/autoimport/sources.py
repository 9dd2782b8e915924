"""Source path normalization for auto-import.

Stability: stable
Since: 0.1.0
Tags: autoimport, sources, paths

Build scripts hand the generator absolute paths of the vendored library
files (``/vendor/ruby/lib/ostruct.rb``). The generated glue refers to them
by module identifier relative to the library base (``ostruct``), which is
the string ``require`` accepts.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_EXTENSION = ".rb"


def normalize_source(source: str, base: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Turn one source path into a module identifier.

    Everything up to and including the last occurrence of ``base`` (plus at
    most one ``/`` or ``\\`` separator) is removed, then a trailing
    ``extension``.

    Args:
        source: Raw file path.
        base: Library base path.
        extension: File suffix to strip.

    Returns:
        Module identifier, e.g. ``net/http`` for ``<base>/net/http.rb``.

    Examples:
        >>> normalize_source("/src/lib/json/ext.rb", "/src/lib")
        'json/ext'
    """
    result = source
    if base:
        result = re.sub(rf"^.*{re.escape(base)}[/\\]?", "", result, flags=re.MULTILINE)
    if extension:
        result = re.sub(rf"{re.escape(extension)}$", "", result)
    return result


def parse_sources(
    raw: str | Iterable[str] | None,
    base: str,
    extension: str = DEFAULT_EXTENSION,
) -> list[str]:
    """Normalize a comma-separated (or already split) source list.

    Blank entries are dropped and surrounding whitespace is stripped; the
    order of the remaining entries is preserved.

    Args:
        raw: ``None``, ``"a.rb,b.rb"``, or an iterable of paths.
        base: Library base path.
        extension: File suffix to strip.

    Returns:
        List of module identifiers.
    """
    if raw is None:
        return []
    entries = raw.split(",") if isinstance(raw, str) else list(raw)

    sources: list[str] = []
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        sources.append(normalize_source(entry, base, extension))
    return sources


__all__ = ["DEFAULT_EXTENSION", "normalize_source", "parse_sources"]
