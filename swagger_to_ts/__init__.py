"""Swagger to TypeScript

Generate TypeScript declarations from the definitions of a Swagger 2
(OpenAPI 2) document. Every object definition becomes an interface,
nested inline objects become interfaces of their own, and the result is
wrapped in a namespace and formatted with prettier.
"""

__version__ = "1.2.1"

from .pipeline import (  # noqa: E402
    CircularReferenceError,
    CodeGeneratorConfig,
    FormatterConfig,
    NameCollisionError,
    PipelineGenerator,
    SchemaResolutionError,
    UnresolvedReferenceError,
    generate_typescript,
)

__all__ = [
    "PipelineGenerator",
    "generate_typescript",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "SchemaResolutionError",
    "UnresolvedReferenceError",
    "NameCollisionError",
    "CircularReferenceError",
]
