"""
Per-pass resolution state.

A ResolutionContext is created for one generator run and threaded
through the classifier and builder. Nothing in it outlives the pass.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ..utils import camel_case
from .analyzer.reference_resolver import ReferenceResolver
from .builder.worklist import DeclarationStack
from .config import CodeGeneratorConfig
from .errors import CircularReferenceError, NameCollisionError
from .schema_ast.nodes import SchemaNode


@dataclass
class ResolutionContext:
    """State owned by one resolution pass.

    Attributes:
        definitions: Sanitized definition name -> node (read-only reference table)
        config: Generator configuration
        resolver: $ref resolver over ``definitions``
        worklist: Shapes waiting for a declaration
        output: Unformatted output lines
        declared: Emitted declaration name -> identifier it was built from
        chasing: Identifiers whose array typedef is currently being followed
    """

    definitions: dict[str, SchemaNode]
    config: CodeGeneratorConfig
    resolver: ReferenceResolver
    worklist: DeclarationStack = field(default_factory=DeclarationStack)
    output: list[str] = field(default_factory=list)
    declared: dict[str, str] = field(default_factory=dict)
    chasing: list[str] = field(default_factory=list)

    @classmethod
    def create(cls, definitions: dict[str, SchemaNode], config: CodeGeneratorConfig) -> ResolutionContext:
        return cls(definitions=definitions, config=config, resolver=ReferenceResolver(definitions))

    def type_name(self, identifier: str) -> str:
        """Name under which an identifier is emitted."""
        return camel_case(identifier) if self.config.camelcase else identifier

    def declare(self, identifier: str, node: SchemaNode) -> str:
        """
        Register a declaration about to be emitted and return its name.

        Raises:
            NameCollisionError: If the name was already emitted, or a nested
                shape's derived identifier shadows a different definition
        """
        name = self.type_name(identifier)
        if not self.config.allow_name_collisions:
            if name in self.declared:
                raise NameCollisionError(name, [self.declared[name], identifier])
            definition = self.definitions.get(identifier)
            if definition is not None and definition is not node:
                raise NameCollisionError(name, [f"#/definitions/{identifier}", node.source_path])
        self.declared[name] = identifier
        return name

    @contextmanager
    def chase(self, identifier: str) -> Iterator[None]:
        """Guard against array typedefs that reference each other in a cycle."""
        if identifier in self.chasing:
            raise CircularReferenceError(self.chasing + [identifier])
        self.chasing.append(identifier)
        try:
            yield
        finally:
            self.chasing.pop()
