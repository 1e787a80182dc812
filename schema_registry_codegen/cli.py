import asyncio
import json
import logging

import click

from .pipeline import (
    AtomicWriter,
    GenerationError,
    GeneratorConfig,
    OutputMode,
    SchemaGenerator,
    extract_definitions,
)
from .pipeline.config import LANGUAGES


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--language", "-l", default=None, type=click.Choice(LANGUAGES))
@click.option(
    "--external-apimachinery",
    is_flag=True,
    default=False,
    help="Import io.k8s.apimachinery schemas from the published apimachinery package",
)
@click.option(
    "--external-kubernetes-models",
    is_flag=True,
    default=False,
    help="Import io.k8s schemas from the published kubernetes-models package",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def schema_registry_codegen(config, language, external_apimachinery, external_kubernetes_models, force, verbose, path, output):
    """Generate registry modules for every schema in an OpenAPI document."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    settings = {}
    if config is not None:
        with open(config) as f:
            settings = json.load(f)

    # CLI flags override the config file
    if language is not None:
        settings["language"] = language
    if external_apimachinery:
        settings["external_apimachinery"] = True
    if external_kubernetes_models:
        settings["external_kubernetes_models"] = True

    with open(path) as f:
        document = json.load(f)

    try:
        generator_config = GeneratorConfig.from_dict(settings)
        if force:
            generator_config.output.mode = OutputMode.FORCE
        definitions = extract_definitions(document)
        files = asyncio.run(SchemaGenerator(generator_config)(definitions))
        written = AtomicWriter(output, generator_config.output).write_all(files)
    except (GenerationError, FileExistsError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(written)} files in {output}")
