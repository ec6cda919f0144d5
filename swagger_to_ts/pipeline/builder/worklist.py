"""
Worklist of shapes awaiting a declaration.

The worklist is a stack: entries are popped from the end they are
pushed to. Seeding it in ascending order therefore emits the last
definition first, and nested shapes found while building a declaration
are emitted before the builder returns to the remaining definitions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...utils import collation_key
from ..schema_ast.nodes import SchemaNode


@dataclass
class WorklistEntry:
    """A shape waiting to become a named declaration."""

    identifier: str
    node: SchemaNode


class DeclarationStack:
    """Last-in, first-out worklist of (identifier, node) entries."""

    def __init__(self):
        self._entries: list[WorklistEntry] = []

    def push(self, identifier: str, node: SchemaNode) -> None:
        self._entries.append(WorklistEntry(identifier, node))

    def pop(self) -> WorklistEntry:
        """Remove and return the most recently pushed entry.

        Raises:
            IndexError: If the worklist is empty
        """
        if not self._entries:
            raise IndexError("pop from an empty declaration worklist")
        return self._entries.pop()

    def seed(self, entries: list[WorklistEntry]) -> None:
        """Push entries in ascending collation order of identifier, so the last one pops first."""
        for entry in sorted(entries, key=lambda e: collation_key(e.identifier)):
            self._entries.append(entry)

    def identifiers(self) -> list[str]:
        """Pending identifiers, bottom of the stack first."""
        return [entry.identifier for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
