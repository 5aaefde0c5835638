"""
ArkType emitter.

Embedded-expression dialect: scalar types are TypeScript-like definition
strings (``"string >= 1"``), unions and enums are pipe-joined (inside a single
definition string when every member is one), arrays append ``[]``
and optional properties are marked on the key (``"name?"``). The root
schema is the bare property map; nested objects go through ``type({...})``.
"""

from __future__ import annotations

import json
import logging

from ..schema_ast.nodes import (
    ArrayNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    StringNode,
    UnionNode,
)
from .base import ROOT_PATH, SchemaEmitter, child_path, js_string, regex_literal

logger = logging.getLogger(__name__)


def is_definition_string(code: str) -> bool:
    """Whether ``code`` is a single quoted definition string such as ``"string"``."""
    try:
        return isinstance(json.loads(code), str)
    except ValueError:
        return False


class ArkTypeEmitter(SchemaEmitter):
    """ArkType emitter."""

    PACKAGE_NAME = "arktype"
    LABEL = "ArkType"

    IMPORT_LINE = 'import { type } from "arktype";'

    TYPES_LIBRARY_IMPORT = 'import { type Type } from "arktype";'
    TYPES_SCHEMA_TYPE = "Type"
    TYPES_INFER_EXPRESSION = 'T["infer"]'

    UTILS_IMPORTS = ""
    OBSERVED_ATTRIBUTES_CODE = """export const getObservedAttributes = (schema: BehaviorSchema): string[] => {
  if (!schema) return [];
  if ("properties" in schema) {
    return Object.keys(schema.properties);
  }
  return [];
};"""

    def _definition(self, text: str) -> str:
        return js_string(text)

    def emit_string(self, node: StringNode, path: str) -> str:
        has_length = node.min_length is not None or node.max_length is not None
        if node.pattern:
            if has_length:
                raise self.unsupported("string pattern combined with a length constraint", path)
            return regex_literal(node.pattern)

        if node.min_length is not None and node.max_length is not None:
            return self._definition(f"{node.min_length} <= string <= {node.max_length}")
        if node.min_length is not None:
            return self._definition(f"string >= {node.min_length}")
        if node.max_length is not None:
            return self._definition(f"string <= {node.max_length}")
        return self._definition("string")

    def emit_number(self, node: NumberNode, path: str) -> str:
        if node.maximum is not None:
            # Only lower bounds are rendered for numbers
            logger.warning("ArkType: dropping maximum %s at %s", node.maximum, path)
        if node.minimum is not None:
            return self._definition(f"number >= {self.format_number(node.minimum, path)}")
        return self._definition("number")

    def emit_boolean(self) -> str:
        return self._definition("boolean")

    def emit_literal(self, node: LiteralNode, path: str) -> str:
        return self._definition(self.format_literal(node.value, path))

    def emit_object(self, node: ObjectNode, path: str, depth: int) -> str:
        return f"type({self.render_properties(node, path, depth)})"

    def emit_root_expression(self, root: ObjectNode) -> str:
        return self.render_properties(root, ROOT_PATH, 0)

    def emit_array(self, node: ArrayNode, path: str, depth: int) -> str:
        item = self._emit(node.items, child_path(path, "items"), depth)
        if is_definition_string(item):
            definition = json.loads(item)
            if isinstance(node.items, UnionNode):
                definition = f"({definition})"
            return self._definition(definition + "[]")
        return f"({item})[]"

    def _join_members(self, members: list[str]) -> str:
        """Pipe-join member renderings, inside one definition string when every member is one."""
        if all(is_definition_string(code) for code in members):
            return self._definition(" | ".join(json.loads(code) for code in members))
        return " | ".join(members)

    def emit_union(self, node: UnionNode, path: str, depth: int) -> str:
        return self._join_members(self._emit_members(node, path, depth))

    def emit_enum(self, node: UnionNode, kind: str, path: str) -> str:
        return self._join_members([self.emit_literal(member, path) for member in node.members])

    def render_optional(self, name: str, code: str, node: OptionalNode, path: str) -> tuple[str, str]:
        if node.has_default:
            logger.warning("ArkType: dropping default %r at %s", node.default_value, path)
        return f"{name}?", code
