"""Schema to Validator

Re-derives a behavior's canonical attribute schema as a schema module for
the validation library a consuming project uses (Zod, Zod Mini, Valibot,
ArkType or TypeBox).
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    DialectId,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaCodegenError,
    UnknownDialectError,
    UnsupportedNodeError,
    generate,
    get_emitter,
    is_valid_dialect,
    resolve_dialect,
)

__all__ = [
    "PipelineGenerator",
    "DialectId",
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
]
