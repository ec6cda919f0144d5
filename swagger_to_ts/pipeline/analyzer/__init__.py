"""
Analyzer module.

Contains reference resolution, type classification and type expression
building.
"""

from __future__ import annotations

from .classifier import TypeClassifier
from .reference_resolver import ReferenceResolver, ResolvedRef
from .type_expr import ANY, PRIMITIVE_TYPES, array_of, literal_union, named, primitive, union

__all__ = [
    "ANY",
    "PRIMITIVE_TYPES",
    "ReferenceResolver",
    "ResolvedRef",
    "TypeClassifier",
    "array_of",
    "literal_union",
    "named",
    "primitive",
    "union",
]
