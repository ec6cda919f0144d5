"""
Schema AST module.

Contains the AST node definitions and parser for Swagger 2 documents.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaDocument,
    SchemaNode,
    UnionNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "RefNode",
    "ArrayNode",
    "UnionNode",
    "ObjectNode",
    "PrimitiveNode",
    "SchemaDocument",
    "SchemaParser",
]
