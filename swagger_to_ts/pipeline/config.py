"""
Configuration for the Swagger to TypeScript pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_WRAPPER = "declare namespace OpenAPI2"


@dataclass
class FormatterConfig:
    """Configuration for the external formatter."""

    # Whether formatting is enabled
    enabled: bool = True

    # Prettier parser (syntax dialect)
    parser: str = "typescript"

    # Prefer single quotes for strings and quoted keys
    single_quote: bool = True

    # Line width for the formatter
    print_width: int = 80

    # Executable (and leading arguments) used to run the formatter
    command: list[str] = field(default_factory=lambda: ["prettier"])

    # Seconds before the formatter process is abandoned
    timeout: int = 30


@dataclass
class CodeGeneratorConfig:
    """Configuration options for declaration generation."""

    # Convert identifiers and property keys to camelCase
    camelcase: bool = False

    # Text opening the enclosing container
    wrapper: str = DEFAULT_WRAPPER

    # Keep the silent overwrite behaviour instead of raising NameCollisionError
    allow_name_collisions: bool = False

    # Add generation comment at top of output
    add_generation_comment: bool = False

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**{fk: fv for fk, fv in v.items() if hasattr(config.formatter, fk)})
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "camelcase": self.camelcase,
            "wrapper": self.wrapper,
            "allow_name_collisions": self.allow_name_collisions,
            "add_generation_comment": self.add_generation_comment,
            "formatter": {
                "enabled": self.formatter.enabled,
                "parser": self.formatter.parser,
                "single_quote": self.formatter.single_quote,
                "print_width": self.formatter.print_width,
                "command": list(self.formatter.command),
                "timeout": self.formatter.timeout,
            },
        }

    @property
    def container(self) -> str:
        """Container opening text, falling back to the default on empty values."""
        return self.wrapper or DEFAULT_WRAPPER
