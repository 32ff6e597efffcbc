"""Whole-file byte I/O with IOResult error handling.

Content is read fully into memory and written back wholesale. Writes go to a
temporary sibling file which then replaces the target, so a failure can never
leave a half-written prefix behind.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .io_result import IOResult

logger = logging.getLogger(__name__)


def _copy_metadata(src: Path, dst: Path) -> None:
    """Carry mode, flags, xattrs and ownership from the file being replaced."""
    st = src.stat()
    try:
        os.chown(dst, st.st_uid, st.st_gid)
    except PermissionError:
        logger.debug(f"Keeping current owner for {src}: not permitted to chown")
    # chown may clear setuid bits, so mode is copied afterwards
    shutil.copystat(src, dst)
    # copystat also copies timestamps; the rewritten file must look modified
    os.utime(dst)


class FileOperations:
    """File I/O helpers that return IOResult instead of raising."""

    @staticmethod
    def read_bytes(path: Path) -> IOResult[bytes]:
        """Read the full content of a regular file.

        Args:
            path: File path to read (must exist)

        Returns:
            IOResult.success(content) or IOResult.failure(error_message)
        """
        if not path.exists():
            return IOResult.failure(f"File not found: {path}")

        if not path.is_file():
            return IOResult.failure(f"Path is not a file: {path}")

        try:
            return IOResult.success(path.read_bytes())
        except OSError as e:
            return IOResult.failure(f"Failed to read file '{path}': {e}")

    @staticmethod
    def write_bytes(path: Path, content: bytes) -> IOResult[int]:
        """Atomically replace the content of an existing file.

        The new content is written to a temporary file in the same directory,
        the original mode, extended attributes and (where permitted) ownership are
        copied over, and the temporary file is moved into place with
        ``os.replace``. Both the file and its directory must be writable.

        Args:
            path: File to overwrite
            content: Complete new content

        Returns:
            IOResult.success(bytes_written) or IOResult.failure(error_message)
        """
        # Symlinked targets are rewritten in place of the link's destination
        target = path.resolve()

        if target.exists() and not os.access(target, os.W_OK):
            return IOResult.failure(f"Failed to write file '{path}': file is not writable")

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
        except OSError as e:
            return IOResult.failure(f"Failed to write file '{path}': {e}")

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            if target.exists():
                _copy_metadata(target, tmp_path)
            os.replace(tmp_path, target)
        except OSError as e:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {tmp_path}: {cleanup_error}")
            return IOResult.failure(f"Failed to write file '{path}': {e}")

        return IOResult.success(len(content))
