from dataclasses import FrozenInstanceError

import pytest

from schema_to_validator.pipeline.analyzer import enum_value_kind, is_enum, literal_kind
from schema_to_validator.pipeline.schema_ast import (
    ArrayNode,
    BooleanNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PropertyDef,
    StringNode,
    UnionNode,
)


class TestObjectNode:
    def test_mapping_keeps_insertion_order(self):
        node = ObjectNode({"b": StringNode(), "a": NumberNode(), "c": BooleanNode()})
        assert node.property_names == ["b", "a", "c"]

    def test_accepts_pairs_and_property_defs(self):
        from_pairs = ObjectNode([("x", StringNode())])
        from_defs = ObjectNode([PropertyDef("x", StringNode())])
        assert from_pairs == from_defs
        assert isinstance(from_pairs.properties, tuple)

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate property names"):
            ObjectNode([("x", StringNode()), ("x", NumberNode())])

    def test_nodes_are_immutable(self):
        node = ObjectNode({"x": StringNode()})
        with pytest.raises(FrozenInstanceError):
            node.properties = ()

    def test_nodes_compare_structurally(self):
        assert ObjectNode({"x": OptionalNode(StringNode(min_length=1))}) == ObjectNode(
            {"x": OptionalNode(StringNode(min_length=1))}
        )


class TestUnionNode:
    def test_members_stored_as_tuple(self):
        node = UnionNode([StringNode(), NumberNode()])
        assert node.members == (StringNode(), NumberNode())

    @pytest.mark.parametrize("members", [[], [StringNode()]])
    def test_fewer_than_two_members_rejected(self, members):
        with pytest.raises(ValueError, match="at least 2 members"):
            UnionNode(members)


class TestClassifier:
    def test_literal_kind_checks_bool_before_number(self):
        assert literal_kind(True) == "boolean"
        assert literal_kind(0) == "number"
        assert literal_kind(1.5) == "number"
        assert literal_kind("x") == "string"
        assert literal_kind(None) is None

    def test_string_literals_are_enum(self):
        node = UnionNode([LiteralNode("a"), LiteralNode("b")])
        assert is_enum(node)
        assert enum_value_kind(node) == "string"

    def test_number_literals_are_enum(self):
        assert enum_value_kind(UnionNode([LiteralNode(1), LiteralNode(2.5)])) == "number"

    def test_boolean_literals_are_enum(self):
        assert enum_value_kind(UnionNode([LiteralNode(True), LiteralNode(False)])) == "boolean"

    def test_mixed_kinds_are_not_enum(self):
        assert not is_enum(UnionNode([LiteralNode("a"), LiteralNode(1)]))
        # True would be a number if bool were not checked first
        assert not is_enum(UnionNode([LiteralNode(1), LiteralNode(True)]))

    def test_non_literal_member_is_not_enum(self):
        assert not is_enum(UnionNode([LiteralNode("a"), StringNode()]))
        assert not is_enum(UnionNode([ArrayNode(StringNode()), LiteralNode("a")]))
