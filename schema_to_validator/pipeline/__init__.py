"""
Pipeline - schema IR to validation-library source generator.

This module provides the phases that turn a behavior's canonical attribute
schema into a schema module for the consuming project's validator:

1. Parser: Parse the runtime JSON Schema into the schema IR
2. Classifier: Decide which unions are literal enumerations
3. Emitters: Render the IR in one dialect (Zod, Zod Mini, Valibot, ArkType, TypeBox)
4. Assembler: Wrap the rendering in the import header and export boilerplate
5. Writer: Optionally write the module atomically
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import SchemaCodegenError, UnknownDialectError, UnsupportedNodeError
from .generator import (
    EMITTERS,
    DialectId,
    PipelineGenerator,
    generate,
    get_emitter,
    is_valid_dialect,
    resolve_dialect,
)
from .writer import AtomicWriter, OutputWriteError

__all__ = [
    "PipelineGenerator",
    "DialectId",
    "EMITTERS",
    "generate",
    "get_emitter",
    "resolve_dialect",
    "is_valid_dialect",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "SchemaCodegenError",
    "UnknownDialectError",
    "UnsupportedNodeError",
    "AtomicWriter",
    "OutputWriteError",
]
