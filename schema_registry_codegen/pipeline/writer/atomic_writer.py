"""
Atomic file writer for generated modules.

Ensures that file writes are atomic to prevent half-written modules
from interrupted operations.
"""

from __future__ import annotations

import ast
import logging
import re
import tempfile
from collections.abc import Sequence
from pathlib import Path

from ..config import OutputConfig, OutputMode
from ..errors import GenerationError
from ..schema_ast.nodes import OutputFile

logger = logging.getLogger(__name__)

_STRING_LITERAL = re.compile(r'"(?:\\.|[^"\\])*"')


class AtomicWriter:
    """Writes generated files with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, output_dir: Path, config: OutputConfig | None = None):
        """Initialize the writer.

        Args:
            output_dir: Directory generated paths are relative to
            config: Output handling options
        """
        self.output_dir = Path(output_dir)
        self.config = config or OutputConfig()

    def write_all(self, files: Sequence[OutputFile]) -> list[Path]:
        """Write every file, or none of them.

        Every file is checked before the first one is written, so a
        duplicate path, an existing file or invalid content leaves the
        output directory untouched.

        Returns:
            Paths written, in input order

        Raises:
            GenerationError: If two files share a path or validation fails
            FileExistsError: If a file exists and mode is ERROR_IF_EXISTS
        """
        seen: set[str] = set()
        for output in files:
            if output.path in seen:
                raise GenerationError(f"Duplicate output path: {output.path}")
            seen.add(output.path)
        for output in files:
            self.check(output)
        return [self._commit(output) for output in files]

    def write(self, output: OutputFile) -> Path:
        """Write one generated file.

        Raises:
            FileExistsError: If the file exists and mode is ERROR_IF_EXISTS
            GenerationError: If validation fails
        """
        self.check(output)
        return self._commit(output)

    def check(self, output: OutputFile) -> None:
        path = self.output_dir / output.path
        if path.exists() and self.config.mode is OutputMode.ERROR_IF_EXISTS:
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if self.config.validate_before_write:
            validate_content(output)

    def _commit(self, output: OutputFile) -> Path:
        path = self.output_dir / output.path
        path.parent.mkdir(parents=True, exist_ok=True)

        if self.config.atomic_write:
            self._replace(path, output.content)
        else:
            path.write_text(output.content, encoding="utf-8")

        logger.info("Wrote %s", path)
        return path

    def _replace(self, path: Path, content: str) -> None:
        # Same directory keeps the rename on one filesystem
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
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise


def validate_content(output: OutputFile) -> None:
    """Check a generated file before it is written.

    Raises:
        GenerationError: If the content is not a well-formed module
    """
    if output.path.endswith(".py"):
        try:
            ast.parse(output.content)
        except SyntaxError as e:
            raise GenerationError(f"Generated Python code is not valid in {output.path}: {e}") from e
    else:
        # Braces inside string literals (descriptions, patterns) do not count
        code = _STRING_LITERAL.sub('""', output.content)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise GenerationError(f"Generated code in {output.path} has unbalanced braces: {open_braces} open, {close_braces} close")

    if "register(" not in output.content:
        raise GenerationError(f"Generated code in {output.path} does not register its schema")
