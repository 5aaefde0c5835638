"""
Schema module assembler.

Resolves a target dialect to its emitter and assembles the complete module
text: the emitter's import header, a blank line, then the exported
``schema``/``Schema`` body. TypeBox targets given the original source text
pass it through unchanged.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .backends import (
    ArkTypeEmitter,
    SchemaEmitter,
    TypeBoxEmitter,
    ValibotEmitter,
    ZodEmitter,
    ZodMiniEmitter,
)
from .config import GeneratorConfig
from .errors import UnknownDialectError
from .schema_ast import ObjectNode, SchemaParser

logger = logging.getLogger(__name__)


class DialectId(str, Enum):
    """Supported target dialects, keyed by the npm package they are detected by."""

    ZOD = "zod"
    VALIBOT = "valibot"
    ARKTYPE = "arktype"
    TYPEBOX = "@sinclair/typebox"
    ZOD_MINI = "zod-mini"


EMITTERS: dict[DialectId, type[SchemaEmitter]] = {
    DialectId.ZOD: ZodEmitter,
    DialectId.VALIBOT: ValibotEmitter,
    DialectId.ARKTYPE: ArkTypeEmitter,
    DialectId.TYPEBOX: TypeBoxEmitter,
    DialectId.ZOD_MINI: ZodMiniEmitter,
}


def resolve_dialect(target: DialectId | str) -> DialectId:
    """
    Resolve a target to a DialectId.

    Args:
        target: A DialectId, or a package name / dialect label (case-insensitive)

    Returns:
        The matching DialectId

    Raises:
        UnknownDialectError: If the target is not a supported dialect
    """
    if isinstance(target, DialectId):
        return target

    if isinstance(target, str):
        wanted = target.strip().lower()
        for dialect, emitter_class in EMITTERS.items():
            if wanted in (dialect.value, emitter_class.LABEL.lower()):
                return dialect

    raise UnknownDialectError(target, [d.value for d in DialectId])


def is_valid_dialect(target: DialectId | str) -> bool:
    """Whether ``target`` resolves to a supported dialect."""
    try:
        resolve_dialect(target)
    except UnknownDialectError:
        return False
    return True


def get_emitter(target: DialectId | str, config: GeneratorConfig | None = None) -> SchemaEmitter:
    """Return an emitter for ``target``."""
    dialect = resolve_dialect(target)
    return EMITTERS[dialect](config)


def generate(
    root: ObjectNode,
    target: DialectId | str,
    raw_source_text: str | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """
    Generate the complete schema module for one dialect.

    Args:
        root: IR root object
        target: Dialect to generate
        raw_source_text: Original canonical (TypeBox) source, returned as-is
            for the TypeBox dialect
        config: Generation configuration

    Returns:
        Module source text

    Raises:
        UnknownDialectError: If the target is not a supported dialect
        UnsupportedNodeError: If the dialect cannot represent part of the tree
    """
    emitter = get_emitter(target, config)
    logger.debug("Generating %s schema module", emitter.label)

    if isinstance(emitter, TypeBoxEmitter) and raw_source_text is not None:
        return emitter.transform(root, raw_source_text)

    return emitter.header() + "\n" + emitter.emit_root(root)


class PipelineGenerator:
    """Generates a schema module from a JSON Schema object.

    Runs the parser, then the assembler for the selected dialect.
    """

    def __init__(
        self,
        schema: dict[str, Any],
        target: DialectId | str,
        config: GeneratorConfig | None = None,
        raw_source_text: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: Root JSON Schema (an object schema)
            target: Dialect to generate
            config: Generation configuration
            raw_source_text: Original TypeBox source for passthrough
        """
        self.schema = schema
        self.dialect = resolve_dialect(target)
        self.config = config or GeneratorConfig()
        self.raw_source_text = raw_source_text

    def generate(self) -> str:
        """Generate the schema module."""
        root = SchemaParser().parse(self.schema)
        return generate(root, self.dialect, self.raw_source_text, self.config)

    def generate_types_file(self) -> str:
        """Generate the types.ts helper that declares InferSchema for the dialect."""
        return get_emitter(self.dialect, self.config).types_file_content()
