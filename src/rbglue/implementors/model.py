"""Data models for implementor tables.

Stability: stable
Since: 0.1.0
Tags: implementors, model, dataclass

An implementor table maps crate names to the implementations of one trait
that the crate provides, e.g. for ``FromStr``::

    chrono -> [impl FromStr for NaiveDate, impl FromStr for Weekday, ...]
    log    -> [impl FromStr for Level, impl FromStr for LevelFilter]

Display strings are stored HTML-escaped, exactly as the documentation page
inserts them.
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Implementor:
    """One implementation descriptor.

    Attributes:
        text: HTML-escaped display string (``impl FromStr for DateTime&lt;Utc&gt;``).
        synthetic: True for auto-trait implementations the compiler derived.
        types: Auxiliary type paths used by the page for synthetic impls.
    """

    text: str
    synthetic: bool = False
    types: tuple[str, ...] = ()

    @classmethod
    def from_signature(
        cls,
        signature: str,
        *,
        synthetic: bool = False,
        types: Iterable[str] = (),
    ) -> Implementor:
        """Build a descriptor from a raw ``impl`` signature, escaping it."""
        return cls(
            text=html.escape(signature, quote=False),
            synthetic=synthetic,
            types=tuple(types),
        )

    @property
    def signature(self) -> str:
        """Unescaped display string."""
        return html.unescape(self.text)

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "synthetic": self.synthetic, "types": list(self.types)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Implementor:
        return cls(
            text=str(data["text"]),
            synthetic=bool(data.get("synthetic", False)),
            types=tuple(str(t) for t in data.get("types", ())),
        )


@dataclass
class ImplementorTable:
    """Crate name -> implementors, iterated in sorted crate order."""

    entries: dict[str, list[Implementor]] = field(default_factory=dict)

    def add(self, crate: str, implementor: Implementor) -> None:
        """Append one implementor to a crate's list."""
        self.entries.setdefault(crate, []).append(implementor)

    def replace(self, crate: str, implementors: Iterable[Implementor]) -> None:
        """Replace a crate's list; an empty list removes the crate."""
        items = list(implementors)
        if items:
            self.entries[crate] = items
        else:
            self.entries.pop(crate, None)

    def remove(self, crate: str) -> None:
        self.entries.pop(crate, None)

    def merge(self, other: ImplementorTable) -> ImplementorTable:
        """Return a new table where ``other``'s crates replace ours."""
        merged = ImplementorTable({crate: list(items) for crate, items in self.entries.items()})
        for crate, items in other.items():
            merged.replace(crate, items)
        return merged

    def crates(self) -> list[str]:
        return sorted(self.entries)

    def items(self) -> Iterator[tuple[str, list[Implementor]]]:
        for crate in self.crates():
            yield crate, self.entries[crate]

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {crate: [impl.to_dict() for impl in items] for crate, items in self.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[Mapping[str, Any]]]) -> ImplementorTable:
        table = cls()
        for crate, items in data.items():
            table.replace(crate, (Implementor.from_dict(item) for item in items))
        return table

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, crate: object) -> bool:
        return crate in self.entries

    def __getitem__(self, crate: str) -> list[Implementor]:
        return self.entries[crate]


__all__ = ["Implementor", "ImplementorTable"]
