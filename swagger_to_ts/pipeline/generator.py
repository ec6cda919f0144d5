"""
Pipeline generator: Swagger 2 definitions to TypeScript declarations.

1. Parse the document into an AST
2. Sanitize definition names into the reference table
3. Seed the worklist with the object definitions, sorted ascending
4. Drain the worklist, one declaration per entry
5. Wrap the declarations in the container and hand them to the formatter
"""

from __future__ import annotations

import logging
from typing import Any

from .. import __version__
from ..cli_utils import reconstruct_command_line
from ..utils import strip_dots
from .builder.declaration_builder import DeclarationBuilder
from .builder.worklist import WorklistEntry
from .config import CodeGeneratorConfig
from .context import ResolutionContext
from .errors import NameCollisionError
from .formatters import Formatter, PrettierFormatter
from .schema_ast.nodes import SchemaNode
from .schema_ast.parser import SchemaParser
from .templates import TemplateSet

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates a TypeScript declaration file from a Swagger 2 document."""

    def __init__(
        self,
        schema: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        formatter: Formatter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: Deserialized Swagger 2 document
            config: Generator configuration (defaults if omitted)
            formatter: Formatter for the final text (prettier if omitted)
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.formatter = formatter or PrettierFormatter()
        self.parser = SchemaParser()
        self.templates = TemplateSet()

    def generate(self) -> str:
        """
        Generate the formatted declaration file.

        Raises:
            SchemaResolutionError: If the document cannot be resolved; no
                partial output is produced
        """
        code = "\n".join(self.generate_lines()) + "\n"
        if not self.config.formatter.enabled:
            return code
        return self.formatter.format(code, self.config.formatter)

    def generate_lines(self) -> list[str]:
        """Run one resolution pass and return the unformatted output lines."""
        document = self.parser.parse(self.schema)
        definitions = self.sanitize_definitions(document.definitions)

        context = ResolutionContext.create(definitions, self.config)
        context.output.extend(
            TemplateSet.render_lines(
                self.templates.prefix,
                wrapper=self.config.container,
                generation_comment=self._generate_command_comment(),
            )
        )

        seed = [WorklistEntry(identifier, node) for identifier, node in definitions.items() if node.type_name == "object"]
        context.worklist.seed(seed)
        logger.debug("Seeded %d definition(s): %s", len(seed), context.worklist.identifiers())

        DeclarationBuilder(context, templates=self.templates).drain()

        context.output.extend(TemplateSet.render_lines(self.templates.suffix))
        return context.output

    def sanitize_definitions(self, definitions: dict[str, SchemaNode]) -> dict[str, SchemaNode]:
        """
        Remove "." from every definition name.

        Raises:
            NameCollisionError: If two names sanitize to the same identifier
                and collisions are not allowed (otherwise the later one wins)
        """
        sanitized: dict[str, SchemaNode] = {}
        origins: dict[str, str] = {}
        for name, node in definitions.items():
            identifier = strip_dots(name)
            if identifier in sanitized and not self.config.allow_name_collisions:
                raise NameCollisionError(identifier, [origins[identifier], name])
            sanitized[identifier] = node
            origins[identifier] = name
        return sanitized

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the output file"""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ..swagger_to_ts import swagger_to_ts as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "swagger-to-ts"

        return f"// Generated by swagger_to_ts v{__version__} : {command_line}"


def generate_typescript(schema: dict[str, Any], config: CodeGeneratorConfig | None = None) -> str:
    """Convenience function: generate formatted declarations for a document."""
    return PipelineGenerator(schema, config).generate()
