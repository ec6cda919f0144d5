"""
CLI utilities for command line reconstruction and input loading.
"""

import json
from pathlib import Path
from typing import Any

import click
import yaml

YAML_SUFFIXES = {".yaml", ".yml"}


def load_document(path: str | Path) -> dict[str, Any]:
    """
    Load a Swagger document from a JSON or YAML file.

    Args:
        path: File path; ".yaml" and ".yml" are read as YAML, anything else as JSON

    Returns:
        The deserialized document
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(f)
        else:
            document = json.load(f)
    if not isinstance(document, dict):
        raise click.BadParameter(f"{path.name} does not contain a mapping at the top level")
    return document


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return "swagger-to-ts"

    if not cli_args:
        return "swagger-to-ts"

    cmd_parts = ["swagger-to-ts"]

    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if value is None or value == "":
            continue

        # Skip options left at their default
        if isinstance(param, click.Option) and value == param.default:
            continue

        if isinstance(param, click.Option) and param.is_flag:
            # Boolean flags: pick the spelling matching the value
            if value:
                options.append(param.opts[0])
            elif param.secondary_opts:
                options.append(param.secondary_opts[0])
            continue

        # Format value (convert file paths to just filenames for cleaner display)
        if isinstance(value, (str, Path)):
            path_obj = Path(str(value))
            formatted_value = path_obj.name if path_obj.exists() else str(value)
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)
        elif isinstance(param, click.Option):
            flag = param.opts[0] if param.opts else f"--{param_name}"
            options.extend([flag, formatted_value])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)
