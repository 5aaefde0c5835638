"""
Valibot emitter.

Wrapping-call dialect: constraints are actions collected in a ``v.pipe``
call and optionality wraps the value in ``v.optional``.
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


class ValibotEmitter(SchemaEmitter):
    """Valibot emitter."""

    PACKAGE_NAME = "valibot"
    LABEL = "Valibot"

    IMPORT_LINE = 'import * as v from "valibot";'

    TYPES_LIBRARY_IMPORT = 'import { type BaseSchema, type InferOutput } from "valibot";'
    TYPES_SCHEMA_TYPE = "BaseSchema"
    TYPES_INFER_EXPRESSION = "InferOutput<T>"

    # Valibot ObjectSchema has 'entries'; duck typing needs no import
    UTILS_IMPORTS = ""
    OBSERVED_ATTRIBUTES_CODE = """export const getObservedAttributes = (schema: BehaviorSchema): string[] => {
  if (!schema) return [];
  // Valibot ObjectSchema has 'entries' property
  if ("entries" in schema && typeof schema.entries === "object") {
    return Object.keys(schema.entries);
  }
  return [];
};"""

    def _pipe(self, pipe: list[str]) -> str:
        return f"v.pipe({', '.join(pipe)})" if len(pipe) > 1 else pipe[0]

    def emit_string(self, node: StringNode, path: str) -> str:
        pipe = ["v.string()"]
        if node.min_length is not None:
            pipe.append(f"v.minLength({node.min_length})")
        if node.max_length is not None:
            pipe.append(f"v.maxLength({node.max_length})")
        if node.pattern:
            pipe.append(f"v.regex({regex_literal(node.pattern)})")
        return self._pipe(pipe)

    def emit_number(self, node: NumberNode, path: str) -> str:
        pipe = ["v.number()"]
        if node.minimum is not None:
            pipe.append(f"v.minValue({self.format_number(node.minimum, path)})")
        if node.maximum is not None:
            pipe.append(f"v.maxValue({self.format_number(node.maximum, path)})")
        return self._pipe(pipe)

    def emit_boolean(self) -> str:
        return "v.boolean()"

    def emit_literal(self, node: LiteralNode, path: str) -> str:
        return f"v.literal({self.format_literal(node.value, path)})"

    def emit_object(self, node: ObjectNode, path: str, depth: int) -> str:
        return f"v.object({self.render_properties(node, path, depth)})"

    def emit_array(self, node: ArrayNode, path: str, depth: int) -> str:
        return f"v.array({self._emit(node.items, child_path(path, 'items'), depth)})"

    def emit_union(self, node: UnionNode, path: str, depth: int) -> str:
        return f"v.union([{', '.join(self._emit_members(node, path, depth))}])"

    def emit_enum(self, node: UnionNode, kind: str, path: str) -> str:
        # v.picklist only takes string and number options
        if kind == "boolean":
            literals = [self.emit_literal(member, path) for member in node.members]
            return f"v.union([{', '.join(literals)}])"
        values = ", ".join(self.format_literal(member.value, path) for member in node.members)
        return f"v.picklist([{values}])"

    def render_optional(self, name: str, code: str, node: OptionalNode, path: str) -> tuple[str, str]:
        # In Valibot, default is optional(T, default)
        if node.has_default:
            return name, f"v.optional({code}, {self.format_default(node.default_value)})"
        return name, f"v.optional({code})"
