"""
Zod Mini emitter.

Wrapping-call dialect over the same ``z`` namespace as Zod: every constraint
and the optional modifier is a top-level function taking the schema as its
first argument (``z.optional(z.min(z.string(), 1))``).
"""

from __future__ import annotations

from ..schema_ast.nodes import NumberNode, OptionalNode, StringNode
from .base import regex_literal
from .zod_backend import ZodEmitter


class ZodMiniEmitter(ZodEmitter):
    """Zod Mini emitter.

    Objects, arrays, unions, literals and enums render exactly as in Zod;
    only constraints and optionality differ.
    """

    PACKAGE_NAME = "zod-mini"
    LABEL = "Zod Mini"

    IMPORT_LINE = 'import * as z from "zod/mini";'

    def emit_string(self, node: StringNode, path: str) -> str:
        code = "z.string()"
        if node.min_length is not None:
            code = f"z.min({code}, {node.min_length})"
        if node.max_length is not None:
            code = f"z.max({code}, {node.max_length})"
        if node.pattern:
            code = f"z.regex({code}, {regex_literal(node.pattern)})"
        return code

    def emit_number(self, node: NumberNode, path: str) -> str:
        # Lower bound is always the innermost call
        code = "z.number()"
        if node.minimum is not None:
            code = f"z.min({code}, {self.format_number(node.minimum, path)})"
        if node.maximum is not None:
            code = f"z.max({code}, {self.format_number(node.maximum, path)})"
        return code

    def render_optional(self, name: str, code: str, node: OptionalNode, path: str) -> tuple[str, str]:
        if node.has_default:
            return name, f"z._default({code}, {self.format_default(node.default_value)})"
        return name, f"z.optional({code})"
