"""
Declaration builder.

Drains the worklist, turning each (identifier, node) entry into one
``export interface`` declaration appended to the output buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...utils import camel_case, capitalize, quote_key
from ..analyzer.classifier import TypeClassifier
from ..analyzer.type_expr import ANY, literal_union, primitive
from ..schema_ast.nodes import RefNode, SchemaNode
from ..templates import TemplateSet

if TYPE_CHECKING:
    from ..context import ResolutionContext

logger = logging.getLogger(__name__)


@dataclass
class Member:
    """One property line of a declaration."""

    key: str
    type: str
    optional: bool = True
    comment_lines: list[str] = field(default_factory=list)


class DeclarationBuilder:
    """Builds declarations for worklist entries until the worklist is empty."""

    def __init__(
        self,
        context: ResolutionContext,
        classifier: TypeClassifier | None = None,
        templates: TemplateSet | None = None,
    ):
        self.context = context
        self.classifier = classifier or TypeClassifier(context)
        self.templates = templates or TemplateSet()

    def drain(self) -> None:
        """Build declarations until no entry is left, newest entries first."""
        while self.context.worklist:
            self.build_next()

    def build_next(self) -> bool:
        """
        Pop one entry and emit its declaration.

        Returns:
            False if the entry was skipped as a primitive alias, True otherwise
        """
        entry = self.context.worklist.pop()
        identifier, node = entry.identifier, entry.node

        properties, supertypes = self._merge_composition(node)

        if self._is_primitive_alias(node, properties):
            logger.debug("Skipping %s: primitive %s with nothing to declare", identifier, node.type_name)
            return False

        name = self.context.declare(identifier, node)
        members = [self._build_member(identifier, key, value, node.required) for key, value in properties.items()]

        lines = TemplateSet.render_lines(
            self.templates.interface,
            name=name,
            extends=supertypes,
            members=members,
            index_type=self._index_signature_type(node),
        )
        self.context.output.extend(lines)
        logger.debug("Declared %s with %d member(s)", name, len(members))
        return True

    def _merge_composition(self, node: SchemaNode) -> tuple[dict[str, SchemaNode], list[str]]:
        """
        Collect the properties and supertypes of a node.

        $ref entries of allOf become supertypes, in order. Properties of
        inline entries are merged in: a later entry overrides an earlier
        one, and the node's own properties override them all. Only the
        node's own "required" list is honoured.
        """
        own = node.properties or {}
        properties = dict(own)
        supertypes: list[str] = []

        for item in node.all_of:
            if isinstance(item, RefNode):
                resolved = self.context.resolver.resolve(item.ref_path)
                supertypes.append(self.context.type_name(resolved.identifier))
            elif item.properties:
                for key, value in item.properties.items():
                    if key not in own:
                        properties[key] = value

        return properties, supertypes

    @staticmethod
    def _is_primitive_alias(node: SchemaNode, properties: dict[str, SchemaNode]) -> bool:
        return not properties and not node.allows_any_property and primitive(node.type_name) is not None

    def _build_member(self, identifier: str, key: str, value: SchemaNode, required: list[str]) -> Member:
        formatted_key = camel_case(key) if self.context.config.camelcase else key

        if value.enum is not None:
            type_expr = literal_union(value.enum)
        else:
            type_expr = self.classifier.classify(value, f"{identifier}{capitalize(formatted_key)}")

        comment_lines = []
        if value.description is not None:
            comment_lines = value.description.splitlines() or [""]

        return Member(
            key=quote_key(formatted_key),
            type=type_expr,
            optional=key not in required,
            comment_lines=comment_lines,
        )

    def _index_signature_type(self, node: SchemaNode) -> str | None:
        additional = node.additional_properties
        if additional is True:
            return ANY
        if isinstance(additional, SchemaNode):
            return self.classifier.classify(additional)
        return None
