import json
import logging
import sys

import click

from .hosts import discover_module, load_descriptor_file
from .pipeline import OUTPUT_ROOT_OPTION, BuilderGenError, BuilderProcessor, GeneratorConfig, OutputMode, ProcessingRound


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True), help="Root directory for generated builders")
@click.option("--format", "format_code", is_flag=True, default=False, help="Format generated code (ruff by default)")
@click.option("--force/--no-force", default=None, help="Overwrite existing builder modules")
@click.option("--search-path", "-I", multiple=True, type=click.Path(exists=True, file_okay=False, resolve_path=True), help="Prepend to sys.path before importing modules")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("sources", nargs=-1, required=True)
def builder_gen(config, output, format_code, force, search_path, verbose, sources):
    """Generate builders for SOURCES: module names or JSON descriptor files."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(levelname)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if format_code:
        config.formatter.enabled = True
    if force is not None:
        config.output.mode = OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS

    for path in reversed(search_path):
        sys.path.insert(0, path)

    elements = []
    for source in sources:
        try:
            if source.endswith(".json"):
                elements.extend(load_descriptor_file(source))
            else:
                elements.extend(discover_module(source))
        except BuilderGenError as e:
            raise click.ClickException(e.message) from e
        except ImportError as e:
            raise click.ClickException(f"Cannot import {source}: {e}") from e

    options = {OUTPUT_ROOT_OPTION: output} if output else {}
    processor = BuilderProcessor(config)
    result = processor.process(ProcessingRound(elements, options))

    for path in result.written:
        click.echo(path)
    for diagnostic in processor.diagnostics.errors:
        click.echo(str(diagnostic), err=True)

    if processor.diagnostics.has_errors:
        sys.exit(1)
