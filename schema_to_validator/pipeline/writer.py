"""
Atomic file writer for generated schema modules.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written module behind.
"""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path

from .config import OutputConfig, OutputMode
from .errors import SchemaCodegenError


class OutputWriteError(SchemaCodegenError):
    """Raised when a generated module fails validation before being written."""

    pass


def validate_schema_module(content: str) -> None:
    """Check that a generated module exports the schema value and its type.

    Raises:
        OutputWriteError: If the module is empty or missing an export
    """
    if not content.strip():
        raise OutputWriteError("Generated module is empty")
    for export in ("export const schema", "export type Schema"):
        if export not in content:
            raise OutputWriteError(f"Generated module is missing '{export}'")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Check every target (overwrite mode, content validation)
    2. Write each to a temporary file in the same directory
    3. Atomically replace the target file
    """

    def __init__(
        self,
        output_config: OutputConfig | None = None,
        validate_module: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            output_config: Overwrite and validation settings
            validate_module: Optional validation function for generated modules
        """
        self.output_config = output_config or OutputConfig()
        self._validate_module = validate_module or validate_schema_module
    def write(self, path: Path, content: str, validate: bool | None = None) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing (defaults to the output config)

        Raises:
            FileExistsError: If the file exists and the mode does not allow overwriting
            OutputWriteError: If validation fails
            OSError: If file operations fail
        """
        self.write_all([(path, content, validate)])

    def write_all(self, outputs: list[tuple[Path, str, bool | None]]) -> None:
        """Write several files, checking all of them before any is written.

        Args:
            outputs: ``(path, content, validate)`` triples, as for ``write``

        Raises:
            FileExistsError: If any file exists and the mode does not allow overwriting
            OutputWriteError: If any content fails validation
            OSError: If file operations fail
        """
        # Every target is checked first so a rejected output never leaves the others on disk
        for path, content, validate in outputs:
            self._check(path, content, validate)
        for path, content, _ in outputs:
            self._replace(path, content)

    def _check(self, path: Path, content: str, validate: bool | None) -> None:
        if path.exists() and self.output_config.mode == OutputMode.ERROR_IF_EXISTS:
            raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

        if validate is None:
            validate = self.output_config.validate_before_write
        if validate:
            self._validate_module(content)

    def _replace(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            # Clean up temp file on any error
            temp_path.unlink(missing_ok=True)
            raise
