"""
Reference resolver for $ref resolution.

Resolves "#/definitions/<name>" paths against the sanitized definitions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...utils import strip_dots
from ..errors import UnresolvedReferenceError
from ..schema_ast.nodes import SchemaNode

DEFINITIONS_PREFIX = "#/definitions/"


@dataclass
class ResolvedRef:
    """A resolved $ref."""

    identifier: str  # Sanitized definition name
    node: SchemaNode  # Resolved definition


class ReferenceResolver:
    """Resolves $ref paths to definitions."""

    def __init__(self, definitions: dict[str, SchemaNode]):
        """
        Initialize the resolver.

        Args:
            definitions: Sanitized definition name -> node
        """
        self.definitions = definitions

    @staticmethod
    def identifier_for(ref_path: str) -> str:
        """Strip the definitions prefix and sanitize the remaining name."""
        return strip_dots(ref_path.replace(DEFINITIONS_PREFIX, "", 1))

    def resolve(self, ref_path: str) -> ResolvedRef:
        """
        Resolve a $ref path to its target.

        Raises:
            UnresolvedReferenceError: If no definition has the referenced name
        """
        identifier = self.identifier_for(ref_path)
        node = self.definitions.get(identifier)
        if node is None:
            raise UnresolvedReferenceError(identifier, ref_path)
        return ResolvedRef(identifier=identifier, node=node)
