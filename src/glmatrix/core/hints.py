"""Annotation lookup shared by every version of a matrix."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class Hints:
    """Mapping from a hint key (as found in the document) to its annotation text.

    Populated before the versions are parsed, then only read.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def add(self, key: str, text: str) -> None:
        self._entries[key] = text

    def lookup(self, key: str | None) -> str | None:
        """Return the annotation for ``key``, or None if unknown."""
        if not key:
            return None
        return self._entries.get(key)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def to_dict(self) -> dict:
        return dict(self._entries)
