"""
Errors raised while resolving a Swagger document.

Every error here aborts the whole pass: the generator either returns a
complete set of declarations or raises.
"""

from __future__ import annotations


class SchemaResolutionError(Exception):
    """Base class for errors that abort a resolution pass."""

    pass


class UnresolvedReferenceError(SchemaResolutionError):
    """Raised when a $ref names a definition that is not in the document."""

    def __init__(self, identifier: str, reference: str = ""):
        self.identifier = identifier
        self.reference = reference or identifier
        super().__init__(f"Unresolved reference '{self.reference}': no definition named '{identifier}'")


class NameCollisionError(SchemaResolutionError):
    """Raised when two distinct shapes end up with the same identifier.

    This can happen when:
    - Two definition names only differ by "." characters
    - A nested shape's derived name ("<Parent><Field>") matches another declaration
    - camelCase conversion maps two identifiers onto the same name
    """

    def __init__(self, identifier: str, sources: list[str] | None = None):
        self.identifier = identifier
        self.sources = sources or []
        detail = f" (from {', '.join(repr(s) for s in self.sources)})" if self.sources else ""
        super().__init__(f"Identifier '{identifier}' is declared more than once{detail}")


class CircularReferenceError(SchemaResolutionError):
    """Raised when array typedefs reference each other in a cycle."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Circular array reference: {' -> '.join(chain)}")
