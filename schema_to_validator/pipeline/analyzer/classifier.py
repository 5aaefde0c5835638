"""
Enum classification for union nodes.

A union is enum-like when it only lists literals of one primitive kind; such
unions render through a dialect's dedicated literal-set construct instead of
its generic union construct.
"""

from __future__ import annotations

from typing import Any

from ..schema_ast.nodes import LiteralNode, UnionNode


def literal_kind(value: Any) -> str | None:
    """Return the primitive kind of a literal value ("string", "number" or "boolean")."""
    # bool first: True is an int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def enum_value_kind(node: UnionNode) -> str | None:
    """Return the shared literal kind of an enum-like union, or None if it is not one."""
    if not node.members:
        return None
    if not all(isinstance(member, LiteralNode) for member in node.members):
        return None

    kinds = {literal_kind(member.value) for member in node.members}
    if len(kinds) != 1:
        return None
    return kinds.pop()


def is_enum(node: UnionNode) -> bool:
    """Whether every member is a literal and all literals share one primitive kind."""
    return enum_value_kind(node) is not None
