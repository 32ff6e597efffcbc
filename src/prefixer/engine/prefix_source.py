"""Resolve the literal prefix from --prefix or --prefix-file."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import ArgumentError, PrefixSourceError
from .file_ops import FileOperations

logger = logging.getLogger(__name__)


def load_prefix_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a prefix file verbatim.

    Bytes are decoded directly, so ``\\r\\n`` and any trailing line break
    survive exactly as stored on disk.

    Raises:
        PrefixSourceError: File missing, unreadable, or not valid ``encoding``
    """
    file_path = Path(path)
    read_result = FileOperations.read_bytes(file_path)
    if not read_result.is_success:
        raise PrefixSourceError(file_path, read_result.error or "read failed")

    assert read_result.value is not None
    try:
        return read_result.value.decode(encoding)
    except UnicodeDecodeError as e:
        raise PrefixSourceError(
            file_path, f"Encoding error reading '{file_path}' with {encoding}: {e}"
        ) from e


def resolve_prefix(
    prefix: str | None = None,
    prefix_file: str | Path | None = None,
    encoding: str = "utf-8",
) -> str:
    """Pick the prefix text for this invocation.

    A non-empty ``prefix`` wins; ``prefix_file`` is only read when it is
    missing or empty.

    Raises:
        PrefixSourceError: Prefix file could not be read
        ArgumentError: Neither source produced a non-empty prefix
    """
    if prefix:
        if prefix_file:
            logger.debug(f"--prefix given, ignoring --prefix-file {prefix_file}")
        return prefix

    resolved = ""
    if prefix_file:
        resolved = load_prefix_file(prefix_file, encoding)
        logger.debug(f"Loaded {len(resolved)} character prefix from {prefix_file}")

    if not resolved:
        raise ArgumentError("prefix not provided, specify --prefix or --prefix-file")
    return resolved
