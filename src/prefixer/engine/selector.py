"""File selection: recursive walk plus base-name glob matching."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from .exceptions import TraversalError

logger = logging.getLogger(__name__)


def matches(name: str, pattern: str) -> bool:
    """Case-sensitive shell-glob match against a single path segment."""
    return fnmatch.fnmatchcase(name, pattern)


def select_files(root: str | Path, pattern: str = "*") -> list[Path]:
    """Collect regular files under ``root`` whose base name matches ``pattern``.

    Directories are walked in name order so the result is stable for an
    unchanged tree: a directory's files come first, then each subdirectory
    in turn. Directory symlinks are not followed.

    Args:
        root: Directory to walk. A regular file is also accepted and is
            selected iff its own name matches.
        pattern: Shell glob (``*``, ``?``, ``[...]``) for the base name.

    Returns:
        Matching file paths, each rooted at ``root`` as given

    Raises:
        TraversalError: Root does not exist or a directory cannot be listed
    """
    root_path = Path(root)

    if not root_path.exists():
        raise TraversalError(root_path, f"no such file or directory: {root_path}")

    if not root_path.is_dir():
        if root_path.is_file() and matches(root_path.name, pattern):
            return [root_path]
        return []

    def on_error(err: OSError) -> None:
        raise TraversalError(root_path, str(err)) from err

    selected: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=on_error):
        dirnames.sort()
        for name in sorted(filenames):
            candidate = Path(dirpath) / name
            if not candidate.is_file():
                # Broken symlinks, sockets, fifos
                continue
            if matches(name, pattern):
                selected.append(candidate)

    logger.debug(f"Selected {len(selected)} files under {root_path} matching {pattern!r}")
    return selected
