"""
Jinja2 templates for the emitted declarations.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

TEMPLATES_DIR = Path(__file__).parent.parent.resolve().absolute() / "templates" / "typescript"


class TemplateSet:
    """Loads the prefix, interface and suffix templates for one pass."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=False)
        self.prefix = self._load(templates_dir / "prefix.ts.jinja2")
        self.interface = self._load(templates_dir / "interface.ts.jinja2")
        self.suffix = self._load(templates_dir / "suffix.ts.jinja2")

    def _load(self, path: Path) -> jinja2.Template:
        return self.jinja_env.from_string(path.read_text(encoding="utf-8"))

    @staticmethod
    def render_lines(template: jinja2.Template, **params) -> list[str]:
        """Render a template and split the result into output lines."""
        return template.render(**params).splitlines()
