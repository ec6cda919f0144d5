"""
Prettier formatter for TypeScript declarations.
"""

from __future__ import annotations

import logging
import subprocess

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class PrettierFormatter(Formatter):
    """Formatter piping code through the prettier executable."""

    def __init__(self):
        self._available: dict[tuple[str, ...], bool] = {}

    def is_available(self, config: FormatterConfig) -> bool:
        """Check if the configured prettier command runs."""
        command = tuple(config.command)
        if command not in self._available:
            try:
                result = subprocess.run(
                    [*command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=config.timeout,
                )
                self._available[command] = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available[command] = False
        return self._available[command]

    def build_command(self, config: FormatterConfig) -> list[str]:
        """Build the prettier command line reading code from stdin."""
        cmd = [*config.command, "--parser", config.parser]
        if config.single_quote:
            cmd.append("--single-quote")
        if config.print_width:
            cmd.extend(["--print-width", str(config.print_width)])
        return cmd

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format TypeScript code using prettier.

        Args:
            code: TypeScript source to format
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if prettier is missing or fails
        """
        if not self.is_available(config):
            logger.warning("Formatter %r is not available, output is left unformatted", " ".join(config.command))
            return code

        cmd = self.build_command(config)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=config.timeout,
            )
        except subprocess.SubprocessError as e:
            logger.warning("Formatter failed: %s", e)
            return code

        if result.returncode != 0:
            logger.warning("Formatter exited with status %d: %s", result.returncode, result.stderr.strip())
            return code
        return result.stdout


def format_with_prettier(
    code: str,
    single_quote: bool = True,
    print_width: int = 80,
) -> str:
    """
    Convenience function to format TypeScript code with prettier.

    Args:
        code: TypeScript source code
        single_quote: Prefer single quotes
        print_width: Maximum line length

    Returns:
        Formatted code
    """
    formatter = PrettierFormatter()
    config = FormatterConfig(
        enabled=True,
        single_quote=single_quote,
        print_width=print_width,
    )
    return formatter.format(code, config)
