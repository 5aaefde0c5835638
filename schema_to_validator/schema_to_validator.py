import json
import logging
from pathlib import Path

import click

from .pipeline import (
    AtomicWriter,
    DialectId,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaCodegenError,
)

DIALECT_CHOICES = [dialect.value for dialect in DialectId]


@click.command()
@click.option("--dialect", "-d", default="zod", type=click.Choice(DIALECT_CHOICES, case_sensitive=False))
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--raw-source",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="Original TypeBox schema file, copied as-is for the @sinclair/typebox dialect",
)
@click.option(
    "--types-output",
    default=None,
    type=click.Path(resolve_path=True),
    help="Also write the types.ts InferSchema helper for the dialect to this path",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing output files")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(resolve_path=True))
def schema_to_validator(dialect, config, raw_source, types_output, force, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    raw_source_text = None
    if raw_source is not None:
        raw_source_text = Path(raw_source).read_text(encoding="utf-8")

    codegen = PipelineGenerator(schema, dialect, config, raw_source_text)
    output_config = OutputConfig(mode=OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS)
    writer = AtomicWriter(output_config)

    try:
        out = codegen.generate()
        # Passthrough text is the author's own file; don't second-guess it
        passthrough = codegen.dialect == DialectId.TYPEBOX and raw_source_text is not None
        outputs = [(Path(output), out, False if passthrough else None)]
        if types_output is not None:
            outputs.append((Path(types_output), codegen.generate_types_file(), False))
        writer.write_all(outputs)
    except (SchemaCodegenError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
