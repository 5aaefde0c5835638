"""
TypeBox emitter.

TypeBox is the canonical authoring format: behavior schemas are written in
it by hand, so the generator hands the original file back unchanged. When no
source text is available the IR is rendered with ``Type.*`` builders.
"""

from __future__ import annotations

from ..schema_ast.nodes import (
    ArrayNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    StringNode,
    UnionNode,
)
from .base import SchemaEmitter, child_path


class TypeBoxEmitter(SchemaEmitter):
    """TypeBox (passthrough) emitter."""

    PACKAGE_NAME = "@sinclair/typebox"
    LABEL = "TypeBox"

    IMPORT_LINE = 'import { Type } from "@sinclair/typebox";'

    TYPES_LIBRARY_IMPORT = 'import { type Static, type TSchema } from "@sinclair/typebox";'
    TYPES_SCHEMA_TYPE = "TSchema"
    TYPES_INFER_EXPRESSION = "Static<T>"

    UTILS_IMPORTS = ""
    OBSERVED_ATTRIBUTES_CODE = """export const getObservedAttributes = (schema: BehaviorSchema): string[] => {
  if (!schema) return [];
  // TypeBox / JSON Schema has 'properties'
  if ("properties" in schema && typeof schema.properties === "object") {
    return Object.keys(schema.properties);
  }
  return [];
};"""

    def transform(self, node: SchemaNode, raw_source_text: str) -> str:
        """Return ``raw_source_text`` unchanged; ``node`` is ignored."""
        return raw_source_text

    def _options(self, options: dict[str, str]) -> str:
        if not options:
            return ""
        return "{ " + ", ".join(f"{key}: {value}" for key, value in options.items()) + " }"

    def emit_string(self, node: StringNode, path: str) -> str:
        options = {}
        if node.min_length is not None:
            options["minLength"] = str(node.min_length)
        if node.max_length is not None:
            options["maxLength"] = str(node.max_length)
        if node.pattern:
            options["pattern"] = self.format_default(node.pattern)
        return f"Type.String({self._options(options)})"

    def emit_number(self, node: NumberNode, path: str) -> str:
        options = {}
        if node.minimum is not None:
            options["minimum"] = self.format_number(node.minimum, path)
        if node.maximum is not None:
            options["maximum"] = self.format_number(node.maximum, path)
        return f"Type.Number({self._options(options)})"

    def emit_boolean(self) -> str:
        return "Type.Boolean()"

    def emit_literal(self, node: LiteralNode, path: str) -> str:
        return f"Type.Literal({self.format_literal(node.value, path)})"

    def emit_object(self, node: ObjectNode, path: str, depth: int) -> str:
        return f"Type.Object({self.render_properties(node, path, depth)})"

    def emit_array(self, node: ArrayNode, path: str, depth: int) -> str:
        return f"Type.Array({self._emit(node.items, child_path(path, 'items'), depth)})"

    def emit_union(self, node: UnionNode, path: str, depth: int) -> str:
        return f"Type.Union([{', '.join(self._emit_members(node, path, depth))}])"

    def emit_enum(self, node: UnionNode, kind: str, path: str) -> str:
        # TypeBox has no literal-set builder; enums stay unions of literals
        literals = [f"Type.Literal({self.format_literal(member.value, path)})" for member in node.members]
        return f"Type.Union([{', '.join(literals)}])"

    def render_optional(self, name: str, code: str, node: OptionalNode, path: str) -> tuple[str, str]:
        if node.has_default:
            # Spreading keeps the Kind symbol of the inner schema
            return name, f"Type.Optional({{ ...{code}, default: {self.format_default(node.default_value)} }})"
        return name, f"Type.Optional({code})"
