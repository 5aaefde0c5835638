"""
Schema IR (Intermediate Representation) node definitions.

These nodes describe a behavior's attribute schema independently of any
validation library. A tree is built once by the parser (or by hand) and is
read-only afterwards: every node is a frozen dataclass and containers are
stored as tuples.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

# Primitive values a LiteralNode may hold
LiteralValue = Union[str, int, float, bool]


@dataclass(frozen=True)
class StringNode:
    """A string value, optionally length- or pattern-constrained."""

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None


@dataclass(frozen=True)
class NumberNode:
    """A number value with optional inclusive bounds."""

    minimum: int | float | None = None
    maximum: int | float | None = None


@dataclass(frozen=True)
class BooleanNode:
    """A boolean value."""


@dataclass(frozen=True)
class LiteralNode:
    """A single constant value."""

    value: LiteralValue = ""


@dataclass(frozen=True)
class PropertyDef:
    """A named property of an object."""

    name: str = ""
    value: SchemaNode = field(default_factory=StringNode)


@dataclass(frozen=True)
class ObjectNode:
    """An object with properties in insertion order.

    ``properties`` accepts a mapping, an iterable of ``(name, node)`` pairs or
    an iterable of ``PropertyDef``; it is always stored as a tuple of
    ``PropertyDef``.
    """

    properties: tuple[PropertyDef, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", _normalize_properties(self.properties))

    @property
    def property_names(self) -> list[str]:
        return [prop.name for prop in self.properties]


@dataclass(frozen=True)
class ArrayNode:
    """An array whose items all match ``items``."""

    items: SchemaNode = field(default_factory=StringNode)


@dataclass(frozen=True)
class UnionNode:
    """A value matching any one of ``members`` (at least two)."""

    members: tuple[SchemaNode, ...] = ()

    def __post_init__(self) -> None:
        members = tuple(self.members)
        if len(members) < 2:
            raise ValueError(f"UnionNode requires at least 2 members, got {len(members)}")
        object.__setattr__(self, "members", members)


@dataclass(frozen=True)
class OptionalNode:
    """Marks a property as optional, possibly with a default value."""

    inner: SchemaNode = field(default_factory=StringNode)

    # For optional properties with default
    default_value: Any = None
    has_default: bool = False


SchemaNode = Union[
    StringNode,
    NumberNode,
    BooleanNode,
    LiteralNode,
    ObjectNode,
    ArrayNode,
    UnionNode,
    OptionalNode,
]


def _normalize_properties(properties: Any) -> tuple[PropertyDef, ...]:
    if isinstance(properties, Mapping):
        items: Iterable[Any] = properties.items()
    else:
        items = properties

    result = []
    for item in items:
        if isinstance(item, PropertyDef):
            result.append(item)
        else:
            name, value = item
            result.append(PropertyDef(name=name, value=value))

    names = [prop.name for prop in result]
    if len(names) != len(set(names)):
        raise ValueError(f"Duplicate property names in object: {names}")
    return tuple(result)
