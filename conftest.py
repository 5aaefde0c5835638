"""Root pytest configuration and shared IR fixtures."""

from __future__ import annotations

import pytest

from schema_to_validator.pipeline.schema_ast import (
    ArrayNode,
    BooleanNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    StringNode,
    UnionNode,
)


def trigger_object() -> ObjectNode:
    return ObjectNode({"event": StringNode(), "from": OptionalNode(StringNode())})


@pytest.fixture
def attribute_root() -> ObjectNode:
    """One property per scalar kind, an enum and a nested object."""
    return ObjectNode(
        {
            "required": StringNode(min_length=1),
            "optional": OptionalNode(StringNode()),
            "enum": UnionNode([LiteralNode("a"), LiteralNode("b")]),
            "number": NumberNode(minimum=0, maximum=10),
            "boolean": BooleanNode(),
            "nested": ObjectNode({"nestedProp": StringNode()}),
        }
    )


@pytest.fixture
def request_trigger_root() -> ObjectNode:
    """The request behavior's trigger attribute: optional union nesting arrays and objects."""
    trigger = OptionalNode(
        UnionNode(
            [
                StringNode(),
                ArrayNode(UnionNode([StringNode(), trigger_object()])),
                trigger_object(),
            ]
        )
    )
    return ObjectNode({"request-trigger": trigger})
