"""
Type classifier.

Computes the TypeScript type expression for a schema node at a use
site. Inline structured shapes are not expanded in place: they are
pushed onto the worklist under a candidate identifier and referenced
by that name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..schema_ast.nodes import ArrayNode, ObjectNode, RefNode, SchemaNode, UnionNode
from .type_expr import ANY, array_of, named, primitive, union

if TYPE_CHECKING:
    from ..context import ResolutionContext

logger = logging.getLogger(__name__)


class TypeClassifier:
    """Maps schema nodes to type expressions, registering nested shapes."""

    def __init__(self, context: ResolutionContext):
        self.context = context

    def classify(self, node: SchemaNode, candidate: str = "") -> str:
        """
        Return the type expression for a node.

        Args:
            node: The node at the use site
            candidate: Identifier for a new declaration, should the node need
                one; empty for anonymous positions (union members, index
                signatures)

        Returns:
            Type expression string

        Raises:
            UnresolvedReferenceError: If a $ref along the way cannot be resolved
            CircularReferenceError: If array typedefs reference each other in a cycle
        """
        if isinstance(node, RefNode):
            return self._classify_ref(node)

        if isinstance(node, ArrayNode) and node.items is not None:
            return self._classify_array(node.items, candidate)

        if isinstance(node, UnionNode):
            return union([self.classify(variant) for variant in node.variants])

        if isinstance(node, ObjectNode) and node.properties is not None:
            return self._register(candidate, node)

        return primitive(node.type_name) or node.type_name or ANY

    def _classify_ref(self, node: RefNode) -> str:
        resolved = self.context.resolver.resolve(node.ref_path)
        target = resolved.node

        # A definition that is only an array of another $ref is inlined as that array
        if isinstance(target, ArrayNode) and isinstance(target.items, RefNode):
            with self.context.chase(resolved.identifier):
                return self.classify(target, resolved.identifier)

        mapped = primitive(target.type_name)
        if mapped:
            return mapped
        return named(self.context.type_name(resolved.identifier))

    def _classify_array(self, items: SchemaNode, candidate: str) -> str:
        if isinstance(items, RefNode):
            return array_of(self._classify_ref(items))

        if items.type_name:
            mapped = primitive(items.type_name)
            if mapped:
                return array_of(mapped)
            return array_of(self._register(candidate, items))

        return array_of(self.classify(items, candidate))

    def _register(self, candidate: str, node: SchemaNode) -> str:
        """Queue a nested shape for its own declaration and reference it by name."""
        if not candidate:
            logger.debug("No name available for nested shape at %s, using %s", node.source_path, ANY)
            return ANY
        logger.debug("Registering nested shape %s from %s", candidate, node.source_path)
        self.context.worklist.push(candidate, node)
        return named(self.context.type_name(candidate))
