from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class TagFilter:
    """Immutable set of lowercase tag names that must survive untouched."""

    names: frozenset[str] = frozenset()

    @classmethod
    def from_names(cls, names: Iterable[str] | str | None) -> TagFilter:
        if isinstance(names, str):
            names = [names]
        normalized = {(name or "").strip().lower() for name in names or ()}
        normalized.discard("")
        return cls(frozenset(normalized))

    def ignores(self, tag: str) -> bool:
        return tag.lower() in self.names

    def __bool__(self) -> bool:
        return bool(self.names)
