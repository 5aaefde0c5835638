"""
Errors raised by the schema transformation pipeline.
"""

from __future__ import annotations


class SchemaCodegenError(Exception):
    """Base class for all pipeline errors."""

    pass


class UnknownDialectError(SchemaCodegenError):
    """Raised when a requested target is not one of the supported dialects."""

    def __init__(self, target: object, supported: list[str]):
        self.target = target
        self.supported = supported
        super().__init__(f'Validator "{target}" not found. Supported: {", ".join(supported)}')


class UnsupportedNodeError(SchemaCodegenError):
    """Raised when a dialect cannot represent a node or constraint combination.

    Attributes:
        construct: Description of the offending construct
        path: Property path at which it occurred (e.g. "#/request-trigger/anyOf/1")
        dialect: Label of the dialect that rejected it, if any
    """

    def __init__(self, construct: str, path: str, dialect: str | None = None):
        self.construct = construct
        self.path = path
        self.dialect = dialect
        prefix = f"{dialect}: " if dialect else ""
        super().__init__(f"{prefix}unsupported {construct} at {path}")
