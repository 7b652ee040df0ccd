"""
Atomic file writer for generated output.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path

from ..analyzer.artifacts import DocumentationPage
from ..config import OutputConfig, OutputMode
from ..errors import CodeWriteError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(self, validate_solidity: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_solidity: Optional validation function for Solidity code
        """
        self._validate_solidity = validate_solidity or self._default_validate_solidity

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            CodeWriteError: If validation fails
            OSError: If file operations fail
        """
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

            if validate and path.suffix == ".sol":
                self._validate_solidity(content)

            temp_path.replace(path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def write_output(
        self,
        path: Path,
        source: str,
        output: OutputConfig,
        documentation: Iterable[DocumentationPage] = (),
        docs_dir: Path | None = None,
    ) -> None:
        """Write the Solidity bundle and, if a directory is given, its documentation.

        Raises:
            FileExistsError: If the bundle exists and the mode is `error`
            CodeWriteError: If validation fails
        """
        if output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self._write_one(path, source, output)
        logger.info("Wrote %s", path)

        if docs_dir is None:
            return
        for page in documentation:
            self._write_one(docs_dir / page.path.lstrip("/"), page.content, output)
        logger.info("Wrote documentation to %s", docs_dir)

    def _write_one(self, path: Path, content: str, output: OutputConfig) -> None:
        if output.atomic_write:
            self.write(path, content, output.validate_before_write)
            return
        if output.validate_before_write and path.suffix == ".sol":
            self._validate_solidity(content)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def _default_validate_solidity(self, content: str) -> None:
        """Default Solidity validation.

        Args:
            content: Solidity code to validate

        Raises:
            CodeWriteError: If validation fails
        """
        # Basic structural checks, no full parsing
        if "pragma solidity" not in content:
            raise CodeWriteError("Generated Solidity code is missing a pragma directive")

        if "library " not in content or "abstract contract " not in content:
            raise CodeWriteError("Generated Solidity code has no library or contract definition")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise CodeWriteError(f"Generated Solidity code has unbalanced braces: {open_braces} open, {close_braces} close")
