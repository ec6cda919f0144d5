import json
import logging

import click

from .cli_utils import load_document
from .pipeline import CodeGeneratorConfig, PipelineGenerator, SchemaResolutionError


@click.command()
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, resolve_path=True), help="Write to this file instead of stdout")
@click.option("--camelcase", "-c", is_flag=True, default=False, help="Convert identifiers and property keys to camelCase")
@click.option("--wrapper", "-w", default=None, type=str, help='Container declaration (default: "declare namespace OpenAPI2")')
@click.option("--config", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON configuration file")
@click.option("--prettier/--no-prettier", default=True, help="Format the output with prettier")
@click.option("--header/--no-header", default=False, help="Add a generation comment above the declarations")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution details to stderr")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def swagger_to_ts(output, camelcase, wrapper, config, prettier, header, verbose, path):
    """Generate TypeScript declarations from the definitions of a Swagger 2 file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if camelcase:
        config.camelcase = True
    if wrapper:
        config.wrapper = wrapper
    if header:
        config.add_generation_comment = True
    if not prettier:
        config.formatter.enabled = False

    schema = load_document(path)

    try:
        out = PipelineGenerator(schema, config).generate()
    except SchemaResolutionError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(out, nl=False)
        return

    with open(output, "w", encoding="utf-8") as f:
        f.write(out)
    click.secho(f"Wrote {output}", fg="green", err=True)
