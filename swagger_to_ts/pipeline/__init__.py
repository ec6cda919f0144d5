"""
Pipeline - Swagger 2 definitions to TypeScript declarations.

1. Phase 1 (Parser): Parse the document into a Schema AST
2. Phase 2 (Analyzer): Resolve references and classify types
3. Phase 3 (Builder): Drain the worklist into declarations
4. Phase 4 (Formatter): Post-process the text (prettier)
"""

from __future__ import annotations

from .config import DEFAULT_WRAPPER, CodeGeneratorConfig, FormatterConfig
from .errors import (
    CircularReferenceError,
    NameCollisionError,
    SchemaResolutionError,
    UnresolvedReferenceError,
)
from .generator import PipelineGenerator, generate_typescript

__all__ = [
    "PipelineGenerator",
    "generate_typescript",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "DEFAULT_WRAPPER",
    "SchemaResolutionError",
    "UnresolvedReferenceError",
    "NameCollisionError",
    "CircularReferenceError",
]
