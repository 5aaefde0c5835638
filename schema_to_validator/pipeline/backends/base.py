"""
Base class for dialect emitters.

Defines the interface that all validation-library emitters implement and the
recursive walk they share: dispatch over the IR variants, object property
maps, optional-property placement and literal formatting.
"""

from __future__ import annotations

import json
import math
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.classifier import enum_value_kind
from ..config import GeneratorConfig
from ..errors import UnsupportedNodeError
from ..schema_ast.nodes import (
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

ROOT_PATH = "#"

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates"


def child_path(path: str, segment: str | int) -> str:
    return f"{path}/{segment}"


# Line terminators that may not appear raw inside a JavaScript string or regex literal
LINE_TERMINATOR_ESCAPES = {
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def js_string(value: str) -> str:
    """Render a string as a double-quoted JavaScript string literal."""
    quoted = json.dumps(value, ensure_ascii=False)
    return quoted.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")


def regex_literal(pattern: str) -> str:
    """Render a pattern as a JavaScript regular expression literal."""
    escaped = re.sub(r"(?<!\\)/", r"\/", pattern)
    for char, escape in LINE_TERMINATOR_ESCAPES.items():
        escaped = escaped.replace(char, escape)
    return f"/{escaped}/"


def _load_templates() -> dict[str, jinja2.Template]:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        autoescape=False,
    )
    return {name: env.get_template(f"{name}.ts.jinja2") for name in ("header", "body", "types")}


# Loaded once at import; rendering does no file I/O
TEMPLATES = _load_templates()


class SchemaEmitter(ABC):
    """Abstract base class for dialect emitters."""

    # npm package the dialect is detected by, and its display name
    PACKAGE_NAME: str = ""
    LABEL: str = ""

    # Import of the dialect's runtime symbol
    IMPORT_LINE: str = ""

    # Pieces of the dialect's types.ts helper
    TYPES_LIBRARY_IMPORT: str = ""
    TYPES_SCHEMA_TYPE: str = ""
    TYPES_INFER_EXPRESSION: str = ""

    # behavior-utils.ts support
    UTILS_IMPORTS: str = ""
    OBSERVED_ATTRIBUTES_CODE: str = ""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the emitter.

        Args:
            config: Generation configuration
        """
        self.config = config or GeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Bind the shared Jinja2 templates."""
        self.header_template = TEMPLATES["header"]
        self.body_template = TEMPLATES["body"]
        self.types_template = TEMPLATES["types"]

    @property
    def package_name(self) -> str:
        return self.PACKAGE_NAME

    @property
    def label(self) -> str:
        return self.LABEL

    def header(self) -> str:
        """Return the import block: the dialect import and the shared InferSchema import."""
        return self.header_template.render(
            import_line=self.IMPORT_LINE,
            types_module=self.config.types_module,
        )

    def emit(self, node: SchemaNode) -> str:
        """
        Render one IR node as dialect source text.

        Args:
            node: The node to render

        Returns:
            Source text of the node's expression

        Raises:
            UnsupportedNodeError: If the dialect cannot represent the node
        """
        return self._emit(node, ROOT_PATH, 0)

    def emit_root(self, root: ObjectNode) -> str:
        """Render the module body exporting ``schema`` and its inferred ``Schema`` type."""
        if not isinstance(root, ObjectNode):
            raise self.unsupported(f"root {type(root).__name__} (expected an object)", ROOT_PATH)
        return self.body_template.render(root_expression=self.emit_root_expression(root))

    def emit_root_expression(self, root: ObjectNode) -> str:
        return self._emit(root, ROOT_PATH, 0)

    def types_file_content(self) -> str:
        """Return the content of the types.ts file declaring InferSchema for this dialect."""
        return self.types_template.render(
            library_import=self.TYPES_LIBRARY_IMPORT,
            schema_type=self.TYPES_SCHEMA_TYPE,
            infer_expression=self.TYPES_INFER_EXPRESSION,
        )

    def observed_attributes_code(self) -> str:
        """Return the ``getObservedAttributes`` function for behavior-utils.ts."""
        return self.OBSERVED_ATTRIBUTES_CODE

    def utils_imports(self) -> str:
        """Return the imports behavior-utils.ts needs for this dialect."""
        return self.UTILS_IMPORTS

    def unsupported(self, construct: str, path: str) -> UnsupportedNodeError:
        return UnsupportedNodeError(construct, path, dialect=self.LABEL)

    def _emit(self, node: SchemaNode, path: str, depth: int) -> str:
        match node:
            case StringNode():
                return self.emit_string(node, path)
            case NumberNode():
                return self.emit_number(node, path)
            case BooleanNode():
                return self.emit_boolean()
            case LiteralNode():
                return self.emit_literal(node, path)
            case ObjectNode():
                return self.emit_object(node, path, depth)
            case ArrayNode():
                return self.emit_array(node, path, depth)
            case UnionNode():
                kind = enum_value_kind(node)
                if kind is not None:
                    return self.emit_enum(node, kind, path)
                return self.emit_union(node, path, depth)
            case OptionalNode():
                raise self.unsupported("optional value outside an object property", path)
            case _:
                raise self.unsupported(f"node {type(node).__name__}", path)

    def _emit_members(self, node: UnionNode, path: str, depth: int) -> list[str]:
        return [self._emit(member, child_path(path, f"anyOf/{i}"), depth) for i, member in enumerate(node.members)]

    def _emit_property(self, prop: PropertyDef, path: str, depth: int) -> tuple[str, str]:
        """Render one property, returning its (key, expression) pair."""
        value = prop.value
        if not isinstance(value, OptionalNode):
            return prop.name, self._emit(value, path, depth)

        if isinstance(value.inner, OptionalNode):
            raise self.unsupported("optional wrapping another optional", path)

        code = self._emit(value.inner, path, depth)
        return self.render_optional(prop.name, code, value, path)

    def render_properties(self, node: ObjectNode, path: str, depth: int) -> str:
        """Render the ``{ "name": expr, ... }`` map of an object, one property per line."""
        if not node.properties:
            return "{}"

        indent = self.config.indent
        lines = []
        for prop in node.properties:
            key, code = self._emit_property(prop, child_path(path, prop.name), depth + 1)
            lines.append(f"{indent * (depth + 1)}{self.quote_key(key)}: {code}")
        return "{\n" + ",\n".join(lines) + "\n" + indent * depth + "}"

    def quote_key(self, key: str) -> str:
        return js_string(key)

    def format_number(self, value: int | float, path: str) -> str:
        """Format a number as a JavaScript numeric literal."""
        if isinstance(value, float):
            if not math.isfinite(value):
                raise self.unsupported(f"non-finite number {value}", path)
            if value.is_integer() and abs(value) < 1e16:
                return str(int(value))
            return repr(value)
        return str(value)

    def format_literal(self, value: Any, path: str) -> str:
        """Format a literal value as a JavaScript literal (strings single-quoted)."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return self.format_number(value, path)
        if isinstance(value, str):
            # JSON escapes cover backslashes and control characters
            escaped = js_string(value)[1:-1].replace("'", "\\'")
            return f"'{escaped}'"
        raise self.unsupported(f"literal value {value!r}", path)

    def format_default(self, value: Any) -> str:
        return json.dumps(value)

    @abstractmethod
    def emit_string(self, node: StringNode, path: str) -> str:
        """Render a string node."""

    @abstractmethod
    def emit_number(self, node: NumberNode, path: str) -> str:
        """Render a number node."""

    @abstractmethod
    def emit_boolean(self) -> str:
        """Render a boolean node."""

    @abstractmethod
    def emit_literal(self, node: LiteralNode, path: str) -> str:
        """Render a single literal."""

    @abstractmethod
    def emit_object(self, node: ObjectNode, path: str, depth: int) -> str:
        """Render an object node."""

    @abstractmethod
    def emit_array(self, node: ArrayNode, path: str, depth: int) -> str:
        """Render an array node."""

    @abstractmethod
    def emit_union(self, node: UnionNode, path: str, depth: int) -> str:
        """Render a union that is not enum-like."""

    @abstractmethod
    def emit_enum(self, node: UnionNode, kind: str, path: str) -> str:
        """
        Render an enum-like union through the dialect's literal-set construct.

        Args:
            node: The union; every member is a LiteralNode
            kind: Shared primitive kind of the literals
            path: Property path of the union
        """

    @abstractmethod
    def render_optional(self, name: str, code: str, node: OptionalNode, path: str) -> tuple[str, str]:
        """
        Apply the dialect's optional strategy to a property.

        Args:
            name: Property name
            code: Rendered expression of the wrapped node
            node: The OptionalNode (carries the default value, if any)
            path: Property path

        Returns:
            The (key, expression) pair to place in the property map
        """
