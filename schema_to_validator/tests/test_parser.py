import json
from pathlib import Path

import pytest

from schema_to_validator.pipeline import UnsupportedNodeError
from schema_to_validator.pipeline.schema_ast import (
    ArrayNode,
    BooleanNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaParser,
    StringNode,
    UnionNode,
)


def load_request_schema():
    """Load the request behavior's runtime JSON Schema"""
    path = Path(__file__).parent / "test_data" / "request.schema.json"
    with open(path) as f:
        return json.load(f)


@pytest.fixture
def parser():
    return SchemaParser()


def test_request_schema(parser):
    root = parser.parse(load_request_schema())

    assert root.property_names == ["request-url", "request-method", "request-trigger", "request-push-url"]
    # Nothing is required at the top level
    assert all(isinstance(prop.value, OptionalNode) for prop in root.properties)

    method = root.properties[1].value.inner
    assert method == UnionNode([LiteralNode(v) for v in ("GET", "POST", "PUT", "DELETE", "PATCH")])

    trigger = root.properties[2].value.inner
    assert isinstance(trigger, UnionNode)
    assert trigger.members[0] == StringNode()
    assert isinstance(trigger.members[1], ArrayNode)
    trigger_object = trigger.members[2]
    assert trigger_object.property_names == ["event", "from", "delay", "once"]
    assert trigger_object.properties[0].value == StringNode()
    assert trigger_object.properties[1].value == OptionalNode(StringNode())
    assert trigger.members[1].items == UnionNode([StringNode(), trigger_object])


def test_scalar_constraints(parser):
    root = parser.parse(
        {
            "type": "object",
            "properties": {
                "name": {"type": "string", "minLength": 1, "maxLength": 5, "pattern": "^a"},
                "count": {"type": "number", "minimum": 0, "maximum": 2.5},
                "flag": {"type": "boolean"},
            },
            "required": ["name", "count", "flag"],
        }
    )
    assert root == ObjectNode(
        {
            "name": StringNode(min_length=1, max_length=5, pattern="^a"),
            "count": NumberNode(minimum=0, maximum=2.5),
            "flag": BooleanNode(),
        }
    )


def test_default_makes_property_optional(parser):
    root = parser.parse(
        {"type": "object", "properties": {"delay": {"type": "number", "default": 0}}, "required": ["delay"]}
    )
    assert root.properties[0].value == OptionalNode(NumberNode(), default_value=0, has_default=True)


def test_null_default_is_kept(parser):
    root = parser.parse({"type": "object", "properties": {"v": {"type": "string", "default": None}}})
    value = root.properties[0].value
    assert value.has_default
    assert value.default_value is None


def test_single_enum_value_collapses_to_literal(parser):
    root = parser.parse({"type": "object", "properties": {"k": {"enum": ["only"]}}, "required": ["k"]})
    assert root.properties[0].value == LiteralNode("only")


def test_type_list_becomes_union(parser):
    root = parser.parse({"type": "object", "properties": {"v": {"type": ["string", "number"]}}, "required": ["v"]})
    assert root.properties[0].value == UnionNode([StringNode(), NumberNode()])


def test_object_without_type(parser):
    root = parser.parse({"properties": {"x": {"type": "string"}}, "required": ["x"]})
    assert root == ObjectNode({"x": StringNode()})


@pytest.mark.parametrize(
    "schema, path",
    [
        ({"type": "string"}, "#"),
        ({"type": "object", "properties": {"n": {"type": "integer"}}}, "#/properties/n"),
        ({"type": "object", "properties": {"r": {"$ref": "#/definitions/x"}}}, "#/properties/r"),
        ({"type": "object", "properties": {"a": {"type": "array"}}}, "#/properties/a"),
        ({"type": "object", "properties": {"a": {"type": "array", "items": [{"type": "string"}]}}}, "#/properties/a"),
        ({"type": "object", "properties": {"u": {"description": "untyped"}}}, "#/properties/u"),
        ({"type": "object", "properties": {"e": {"enum": []}}}, "#/properties/e"),
        ({"type": "object", "properties": {"c": {"const": None}}}, "#/properties/c"),
    ],
)
def test_unsupported_constructs(parser, schema, path):
    with pytest.raises(UnsupportedNodeError) as exc_info:
        parser.parse(schema)
    assert exc_info.value.path == path


def test_type_list_keeps_sibling_constraints(parser):
    root = parser.parse(
        {
            "type": "object",
            "properties": {"v": {"type": ["string", "number"], "minLength": 2, "pattern": "^a", "minimum": 1}},
            "required": ["v"],
        }
    )
    assert root.properties[0].value == UnionNode([StringNode(min_length=2, pattern="^a"), NumberNode(minimum=1)])
