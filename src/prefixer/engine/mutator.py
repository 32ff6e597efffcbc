"""Prefix mutation: idempotent inject and remove of a literal leading prefix.

Both operations work on raw bytes. A file is read fully, the new content is
computed in memory, and the file is rewritten in one atomic replace. Nothing
is written when the file is already in the desired state.

Inject and remove treat the line-break flag asymmetrically:

- inject checks for the bare prefix only. A file that starts with the prefix
  counts as done even if the next byte is not a line break and the flag is
  set. Running inject twice therefore never stacks prefixes, whatever the
  flag.
- remove strips the prefix, then at most one ``\\n`` directly after it when
  the flag is set. A missing line break is not an error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import FileMutationError
from .file_ops import FileOperations
from .request import MutationResult, MutationStatus, Operation

logger = logging.getLogger(__name__)

LINE_BREAK = b"\n"


def _as_bytes(prefix: str | bytes, encoding: str) -> bytes:
    return prefix if isinstance(prefix, bytes) else prefix.encode(encoding)


def _read(path: Path) -> bytes:
    read_result = FileOperations.read_bytes(path)
    if read_result.is_failure:
        raise FileMutationError(path, read_result.error or "read failed")
    return read_result.unwrap()


def _write(path: Path, content: bytes) -> None:
    write_result = FileOperations.write_bytes(path, content)
    if write_result.is_failure:
        raise FileMutationError(path, write_result.error or "write failed")


def add_prefix(content: bytes, prefix: bytes, add_line_break: bool = False) -> bytes | None:
    """Return ``content`` with ``prefix`` prepended, or None if already present."""
    if content.startswith(prefix):
        return None
    if add_line_break:
        return prefix + LINE_BREAK + content
    return prefix + content


def strip_prefix(content: bytes, prefix: bytes, remove_line_break: bool = False) -> bytes | None:
    """Return ``content`` with one leading ``prefix`` removed, or None if absent."""
    if not content.startswith(prefix):
        return None
    stripped = content[len(prefix) :]
    if remove_line_break and stripped.startswith(LINE_BREAK):
        stripped = stripped[len(LINE_BREAK) :]
    return stripped


def inject(
    path: str | Path, prefix: str | bytes, add_line_break: bool = False, encoding: str = "utf-8"
) -> bool:
    """Prepend ``prefix`` to the file unless it already starts with it.

    Args:
        path: File to mutate
        prefix: Literal prefix (str is encoded with ``encoding``)
        add_line_break: Insert one ``\\n`` between prefix and original content
        encoding: Encoding for a str prefix

    Returns:
        True if the file was rewritten, False if it already had the prefix

    Raises:
        FileMutationError: File could not be read or written
    """
    file_path = Path(path)
    content = _read(file_path)
    new_content = add_prefix(content, _as_bytes(prefix, encoding), add_line_break)
    if new_content is None:
        logger.debug(f"{file_path}: prefix already present")
        return False

    _write(file_path, new_content)
    logger.debug(f"{file_path}: prefix injected ({len(content)} -> {len(new_content)} bytes)")
    return True


def remove(
    path: str | Path, prefix: str | bytes, remove_line_break: bool = False, encoding: str = "utf-8"
) -> bool:
    """Strip one leading ``prefix`` from the file if it starts with it.

    Args:
        path: File to mutate
        prefix: Literal prefix (str is encoded with ``encoding``)
        remove_line_break: Also strip one ``\\n`` directly after the prefix
        encoding: Encoding for a str prefix

    Returns:
        True if the file was rewritten, False if the prefix was absent

    Raises:
        FileMutationError: File could not be read or written
    """
    file_path = Path(path)
    content = _read(file_path)
    new_content = strip_prefix(content, _as_bytes(prefix, encoding), remove_line_break)
    if new_content is None:
        logger.debug(f"{file_path}: prefix not present")
        return False

    _write(file_path, new_content)
    logger.debug(f"{file_path}: prefix removed ({len(content)} -> {len(new_content)} bytes)")
    return True


class PrefixMutator:
    """Applies one operation with a fixed prefix to files, one at a time.

    Wraps :func:`inject` / :func:`remove` and turns their outcome, including
    FileMutationError, into a MutationResult so the caller can keep going.
    """

    def __init__(
        self,
        operation: Operation,
        prefix: str | bytes,
        with_line_end: bool = False,
        encoding: str = "utf-8",
    ):
        self.operation = operation
        self.prefix = _as_bytes(prefix, encoding)
        self.with_line_end = with_line_end

    def apply(self, path: str | Path) -> MutationResult:
        """Mutate a single file and report the tri-state outcome."""
        file_path = Path(path)
        try:
            if self.operation == Operation.INJECT:
                changed = inject(file_path, self.prefix, self.with_line_end)
            else:
                changed = remove(file_path, self.prefix, self.with_line_end)
        except FileMutationError as e:
            logger.info(f"{self.operation.value} failed for {file_path}: {e}")
            return MutationResult(path=str(file_path), status=MutationStatus.FAILED, error=str(e))

        status = MutationStatus.CHANGED if changed else MutationStatus.UNCHANGED
        return MutationResult(path=str(file_path), status=status)
