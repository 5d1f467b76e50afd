"""Extension entries and their "via" relationship."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Status(str, Enum):
    """Implementation status of an extension."""

    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    DONE = "done"


# Spellings used by Mesa's feature tracker.
STATUS_ALIASES = {
    "not-started": Status.NOT_STARTED,
    "not started": Status.NOT_STARTED,
    "in-progress": Status.IN_PROGRESS,
    "in progress": Status.IN_PROGRESS,
    "incomplete": Status.IN_PROGRESS,
    "started": Status.IN_PROGRESS,
    "done": Status.DONE,
    "complete": Status.DONE,
}


def parse_status(raw: str) -> Status | None:
    """Map a status attribute to a Status, or None if it is not a known spelling."""
    return STATUS_ALIASES.get(raw.strip().lower())


@dataclass
class Extension:
    """One feature/extension entry of a version.

    ``via_name`` is the raw name of the extension this one is implemented
    through. It is bound to the target node by the matrix-wide resolution
    pass; ``via`` never owns the target.
    """

    name: str
    status: Status | None = None
    note: str | None = None
    hint: str | None = None
    via_name: str | None = None
    supported_drivers: dict[str, bool] = field(default_factory=dict)
    subextensions: list[Extension] = field(default_factory=list)
    via: Extension | None = field(default=None, init=False, repr=False, compare=False)

    def bind_via(self, target: Extension) -> bool:
        """Bind the via reference if still unresolved. Returns True if bound now."""
        if self.via is not None:
            return False
        self.via = target
        return True

    def resolve_via_chain(self) -> Extension | None:
        """
        Follow bound via references to the extension whose status is authored.

        Returns self when nothing is bound (including a dangling reference),
        the last extension of the chain otherwise, or None if the chain loops.
        """
        visited: set[int] = set()
        node = self
        while node.via is not None:
            visited.add(id(node))
            node = node.via
            if id(node) in visited:
                return None
        return node

    def is_cyclic(self) -> bool:
        return self.resolve_via_chain() is None

    def effective_status(self) -> Status | None:
        """Status after following the via chain; None if unresolved or cyclic."""
        terminal = self.resolve_via_chain()
        if terminal is None:
            return None
        return terminal.status

    def effective_supported_drivers(self) -> dict[str, bool] | None:
        """Driver support after following the via chain; None on a cycle."""
        terminal = self.resolve_via_chain()
        if terminal is None:
            return None
        return dict(terminal.supported_drivers)

    def iter_tree(self) -> Iterator[Extension]:
        """Yield this extension then its sub-extensions, depth-first."""
        yield self
        for sub in self.subextensions:
            yield from sub.iter_tree()

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict (for the CLI and query service)."""
        status = self.effective_status()
        return {
            "name": self.name,
            "status": self.status.value if self.status is not None else None,
            "effective_status": status.value if status is not None else None,
            "note": self.note,
            "hint": self.hint,
            "via": self.via_name,
            "via_resolved": self.via is not None,
            "supported_drivers": dict(self.supported_drivers),
            "subextensions": [s.to_dict() for s in self.subextensions],
        }
