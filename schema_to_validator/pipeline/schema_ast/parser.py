"""
JSON Schema parser that builds the schema IR.

Turns the runtime JSON Schema of a behavior (what a TypeBox ``Type.Object``
evaluates to) into an ``ObjectNode`` tree. The canonical schema is assumed
to be well-formed; anything the IR has no variant for is rejected with the
JSON path where it was found.
"""

from __future__ import annotations

from typing import Any

from ..errors import UnsupportedNodeError
from .nodes import (
    ArrayNode,
    BooleanNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PropertyDef,
    SchemaNode,
    StringNode,
    UnionNode,
)


class SchemaParser:
    """Parses JSON Schema into the schema IR."""

    def parse(self, schema: dict[str, Any]) -> ObjectNode:
        """
        Parse a root JSON Schema object.

        Args:
            schema: The JSON Schema dictionary (must describe an object)

        Returns:
            The IR root
        """
        node = self._parse_schema_node(schema, "#")
        if not isinstance(node, ObjectNode):
            raise UnsupportedNodeError("root schema that is not an object", "#")
        return node

    def _parse_schema_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: Current path in schema (for error messages)

        Returns:
            Appropriate IR node
        """
        if not isinstance(schema, dict):
            raise UnsupportedNodeError(f"schema value {schema!r}", path)

        if "$ref" in schema:
            raise UnsupportedNodeError(f"reference {schema['$ref']!r}", path)

        if "const" in schema:
            return self._parse_literal(schema["const"], path)

        if "enum" in schema:
            return self._parse_enum_node(schema["enum"], path)

        # Handle oneOf/anyOf
        if "anyOf" in schema or "oneOf" in schema:
            return self._parse_union_node(schema, path)

        if "type" in schema:
            return self._parse_type_node(schema, path)

        # Handle object with properties but no type
        if "properties" in schema:
            return self._parse_object_node(schema, path)

        raise UnsupportedNodeError(f"schema without a type: {sorted(schema)}", path)

    def _parse_type_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """Parse a type-based node."""
        type_value = schema["type"]

        # Single-element type array is not a union
        if isinstance(type_value, list) and len(type_value) == 1:
            type_value = type_value[0]

        if isinstance(type_value, list):
            # Sibling keywords (minLength, minimum, ...) apply to the member of their type
            members = [self._parse_type_node({**schema, "type": t}, f"{path}/type/{t}") for t in type_value]
            return UnionNode(members=members)

        match type_value:
            case "string":
                return StringNode(
                    min_length=schema.get("minLength"),
                    max_length=schema.get("maxLength"),
                    pattern=schema.get("pattern"),
                )
            case "number":
                return NumberNode(minimum=schema.get("minimum"), maximum=schema.get("maximum"))
            case "boolean":
                return BooleanNode()
            case "object":
                return self._parse_object_node(schema, path)
            case "array":
                return self._parse_array_node(schema, path)
            case _:
                raise UnsupportedNodeError(f"type {type_value!r}", path)

    def _parse_literal(self, value: Any, path: str) -> LiteralNode:
        if not isinstance(value, (str, int, float, bool)):
            raise UnsupportedNodeError(f"literal value {value!r}", path)
        return LiteralNode(value=value)

    def _parse_enum_node(self, values: list[Any], path: str) -> SchemaNode:
        """Parse an enum list into a union of literals."""
        literals = [self._parse_literal(value, f"{path}/enum/{i}") for i, value in enumerate(values)]
        if not literals:
            raise UnsupportedNodeError("empty enum", path)
        if len(literals) == 1:
            return literals[0]
        return UnionNode(members=literals)

    def _parse_union_node(self, schema: dict[str, Any], path: str) -> SchemaNode:
        """Parse a oneOf or anyOf union node."""
        union_type = "anyOf" if "anyOf" in schema else "oneOf"
        variants = [self._parse_schema_node(variant, f"{path}/{union_type}/{i}") for i, variant in enumerate(schema[union_type])]

        if not variants:
            raise UnsupportedNodeError(f"empty {union_type}", path)
        if len(variants) == 1:
            return variants[0]
        return UnionNode(members=variants)

    def _parse_array_node(self, schema: dict[str, Any], path: str) -> ArrayNode:
        """Parse an array type node."""
        items_schema = schema.get("items")
        if not isinstance(items_schema, dict):
            # Tuples and untyped arrays have no IR variant
            raise UnsupportedNodeError("array without a single item schema", path)
        return ArrayNode(items=self._parse_schema_node(items_schema, f"{path}/items"))

    def _parse_object_node(self, schema: dict[str, Any], path: str) -> ObjectNode:
        """Parse an object type node."""
        properties = []
        required_fields = schema.get("required", [])

        for prop_name, prop_schema in schema.get("properties", {}).items():
            prop_path = f"{path}/properties/{prop_name}"
            prop_node = self._parse_schema_node(prop_schema, prop_path)

            has_default = "default" in prop_schema
            if has_default or prop_name not in required_fields:
                prop_node = OptionalNode(
                    inner=prop_node,
                    default_value=prop_schema.get("default"),
                    has_default=has_default,
                )

            properties.append(PropertyDef(name=prop_name, value=prop_node))

        return ObjectNode(properties=properties)
