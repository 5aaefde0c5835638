import logging

import pytest

from schema_to_validator.pipeline import UnsupportedNodeError, generate, get_emitter
from schema_to_validator.pipeline.backends.arktype_backend import is_definition_string
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


@pytest.fixture
def emitter():
    return get_emitter("arktype")


def test_root_is_bare_property_map(attribute_root):
    output = generate(attribute_root, "arktype")
    assert output.startswith('import { type } from "arktype";\n')
    assert "export const schema = {\n" in output
    assert "export const schema = type(" not in output
    assert '  "required": "string >= 1",\n' in output
    assert '  "optional?": "string",\n' in output
    assert "  \"enum\": \"'a' | 'b'\",\n" in output
    assert '  "boolean": "boolean",\n' in output
    assert '  "nested": type({\n    "nestedProp": "string"\n  })\n' in output


def test_number_maximum_is_dropped_with_warning(emitter, caplog):
    with caplog.at_level(logging.WARNING):
        code = emitter.emit(NumberNode(minimum=0, maximum=10))
    assert code == '"number >= 0"'
    assert "dropping maximum 10" in caplog.text


def test_default_is_dropped_with_warning(caplog):
    root = ObjectNode({"delay": OptionalNode(NumberNode(), default_value=5, has_default=True)})
    with caplog.at_level(logging.WARNING):
        output = generate(root, "arktype")
    assert '"delay?": "number"' in output
    assert "#/delay" in caplog.text


@pytest.mark.parametrize(
    "node, expected",
    [
        (StringNode(), '"string"'),
        (StringNode(min_length=2), '"string >= 2"'),
        (StringNode(max_length=8), '"string <= 8"'),
        (StringNode(min_length=2, max_length=8), '"2 <= string <= 8"'),
        (StringNode(pattern="^x/y$"), "/^x\\/y$/"),
        (BooleanNode(), '"boolean"'),
        (LiteralNode("on"), "\"'on'\""),
        (LiteralNode(3), '"3"'),
    ],
)
def test_scalar_definitions(emitter, node, expected):
    assert emitter.emit(node) == expected


def test_pattern_with_length_rejected():
    root = ObjectNode({"code": StringNode(min_length=1, pattern="^a")})
    with pytest.raises(UnsupportedNodeError) as exc_info:
        generate(root, "arktype")
    assert exc_info.value.path == "#/code"
    assert str(exc_info.value).startswith("ArkType: unsupported")


def test_array_of_definition_string_stays_one_string(emitter):
    assert emitter.emit(ArrayNode(StringNode())) == '"string[]"'
    assert emitter.emit(ArrayNode(ArrayNode(NumberNode()))) == '"number[][]"'


def test_array_of_union_is_parenthesized(emitter):
    code = emitter.emit(ArrayNode(UnionNode([StringNode(), NumberNode()])))
    assert code == '"(string | number)[]"'


def test_array_of_object_union_is_parenthesized(emitter):
    code = emitter.emit(ArrayNode(UnionNode([StringNode(), ObjectNode({})])))
    assert code == '("string" | type({}))[]'


@pytest.mark.parametrize(
    "values, expected",
    [
        (["on", "off"], "\"'on' | 'off'\""),
        ([1, 2, 3], '"1 | 2 | 3"'),
        ([True, False], '"true | false"'),
    ],
)
def test_enum_is_one_definition_string(emitter, values, expected):
    # Bare JS literals joined by | would be a bitwise OR
    assert emitter.emit(UnionNode([LiteralNode(v) for v in values])) == expected


def test_enum_matches_union_of_same_literals(emitter):
    node = UnionNode([LiteralNode(1), LiteralNode(2)])
    assert emitter.emit(node) == emitter.emit_union(node, "#", 0)


def test_union_of_scalars_is_one_definition_string(emitter):
    assert emitter.emit(UnionNode([StringNode(min_length=1), BooleanNode()])) == '"string >= 1 | boolean"'


def test_request_trigger_layout(request_trigger_root):
    output = generate(request_trigger_root, "arktype")
    assert '"request-trigger?": "string" | ("string" | type({' in output
    assert '"from?": "string"' in output
    assert "}))[] | type({" in output


def test_is_definition_string():
    assert is_definition_string('"string"')
    assert not is_definition_string("type({})")
    assert not is_definition_string('"a" | "b"')
    assert not is_definition_string("/^a$/")
