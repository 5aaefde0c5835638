"""
Zod emitter.

Chained-method dialect: constraints and optionality are appended as method
calls on the base constructor (``z.string().min(1).optional()``).
"""

from __future__ import annotations

from ..schema_ast.nodes import (
    ArrayNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    StringNode,
    UnionNode,
)
from .base import SchemaEmitter, child_path, regex_literal


class ZodEmitter(SchemaEmitter):
    """Zod emitter."""

    PACKAGE_NAME = "zod"
    LABEL = "Zod"

    IMPORT_LINE = 'import { z } from "zod";'

    TYPES_LIBRARY_IMPORT = 'import { z } from "zod";'
    TYPES_SCHEMA_TYPE = "z.ZodType"
    TYPES_INFER_EXPRESSION = "z.infer<T>"

    UTILS_IMPORTS = 'import { z } from "zod";'
    OBSERVED_ATTRIBUTES_CODE = """export const getObservedAttributes = (schema: BehaviorSchema): string[] => {
  if (!schema) return [];
  if (schema instanceof z.ZodObject) {
    return Object.keys(schema.shape);
  }
  return [];
};"""

    def emit_string(self, node: StringNode, path: str) -> str:
        code = "z.string()"
        if node.min_length is not None:
            code += f".min({node.min_length})"
        if node.max_length is not None:
            code += f".max({node.max_length})"
        if node.pattern:
            code += f".regex({regex_literal(node.pattern)})"
        return code

    def emit_number(self, node: NumberNode, path: str) -> str:
        code = "z.number()"
        if node.minimum is not None:
            code += f".min({self.format_number(node.minimum, path)})"
        if node.maximum is not None:
            code += f".max({self.format_number(node.maximum, path)})"
        return code

    def emit_boolean(self) -> str:
        return "z.boolean()"

    def emit_literal(self, node: LiteralNode, path: str) -> str:
        return f"z.literal({self.format_literal(node.value, path)})"

    def emit_object(self, node: ObjectNode, path: str, depth: int) -> str:
        return f"z.object({self.render_properties(node, path, depth)})"

    def emit_array(self, node: ArrayNode, path: str, depth: int) -> str:
        return f"z.array({self._emit(node.items, child_path(path, 'items'), depth)})"

    def emit_union(self, node: UnionNode, path: str, depth: int) -> str:
        return f"z.union([{', '.join(self._emit_members(node, path, depth))}])"

    def emit_enum(self, node: UnionNode, kind: str, path: str) -> str:
        values = ", ".join(self.format_literal(member.value, path) for member in node.members)
        # z.enum only takes strings; other literal sets use the multi-value literal
        if kind == "string":
            return f"z.enum([{values}])"
        return f"z.literal([{values}])"

    def render_optional(self, name: str, code: str, node: OptionalNode, path: str) -> tuple[str, str]:
        if node.has_default:
            return name, f"{code}.default({self.format_default(node.default_value)})"
        return name, f"{code}.optional()"
