"""
AST node definitions for Swagger 2 definitions.

Each node class stands for one discriminating shape. The parser picks
the class from the first matching key, in the same priority order the
type classifier uses. The object fields (properties, required, allOf
and additionalProperties) are kept on every node regardless of its
shape, since a declaration reads them from whatever node it is built for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Free text, rendered as a comment above the property
    description: str | None = None

    # Literal values; when present on a property they replace its type
    enum: list[Any] | None = None

    # "array", "boolean", "integer", "number", "object" or "string"
    type_name: str | None = None

    # None when "properties" is absent, which is not the same as an empty mapping
    properties: dict[str, SchemaNode] | None = None
    required: list[str] = field(default_factory=list)
    all_of: list[SchemaNode] = field(default_factory=list)
    additional_properties: bool | SchemaNode | None = None

    # Original location in the document (for error messages)
    source_path: str = ""

    @property
    def allows_any_property(self) -> bool:
        return self.additional_properties is True


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref to another definition."""

    ref_path: str = ""  # e.g. "#/definitions/Pet"


@dataclass
class ArrayNode(SchemaNode):
    """Represents a node with "items"."""

    items: SchemaNode | None = None


@dataclass
class UnionNode(SchemaNode):
    """Represents a oneOf union."""

    variants: list[SchemaNode] = field(default_factory=list)


@dataclass
class ObjectNode(SchemaNode):
    """Represents a structured shape: properties, allOf and/or additionalProperties."""


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a bare kind, or nothing at all (type_name is None)."""


@dataclass
class SchemaDocument:
    """Root of the parsed document: definition name -> node."""

    definitions: dict[str, SchemaNode] = field(default_factory=dict)

    # Raw document for reference
    raw_schema: dict[str, Any] = field(default_factory=dict)
