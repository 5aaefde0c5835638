"""
Schema IR module.

Contains the IR node definitions and the JSON Schema parser that builds them.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    BooleanNode,
    LiteralNode,
    LiteralValue,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PropertyDef,
    SchemaNode,
    StringNode,
    UnionNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "StringNode",
    "NumberNode",
    "BooleanNode",
    "LiteralNode",
    "LiteralValue",
    "ObjectNode",
    "PropertyDef",
    "ArrayNode",
    "UnionNode",
    "OptionalNode",
    "SchemaParser",
]
