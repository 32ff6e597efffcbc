"""Error kinds raised by the prefixer engine.

Three kinds abort an invocation before any file is touched (ArgumentError,
PrefixSourceError, TraversalError). FileMutationError is scoped to a single
file: the runner records it and moves on to the next one.
"""

from __future__ import annotations

from pathlib import Path


class PrefixerError(Exception):
    """Base class for all prefixer errors."""


class ArgumentError(PrefixerError):
    """Missing or invalid command-line input."""


class ConfigError(PrefixerError):
    """
    Configuration file could not be parsed or failed validation.

    Attributes:
        path: Config file that was being loaded
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config file {path}: {reason}")

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"ConfigError(path={str(self.path)!r})"


class PrefixSourceError(PrefixerError):
    """
    Prefix file could not be read.

    Attributes:
        path: The --prefix-file path
        reason: Underlying I/O or decoding error message
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to load content of prefix file: {reason}")

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"PrefixSourceError(path={str(self.path)!r})"


class TraversalError(PrefixerError):
    """
    Root path could not be enumerated.

    Raised when the root does not exist or a directory below it cannot be
    listed. Selection is all-or-nothing, so no file has been mutated when
    this surfaces.

    Attributes:
        root: Root path given on the command line
        reason: What went wrong while walking
    """

    def __init__(self, root: Path, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"error walking root path {root}: {reason}")

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"TraversalError(root={str(self.root)!r})"


class FileMutationError(PrefixerError):
    """
    A single target file could not be read or written.

    The file's content on disk is unchanged: reads happen before any write,
    and writes go through an atomic replace.

    Attributes:
        path: The file being mutated
        reason: Underlying I/O error message
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"FileMutationError(path={str(self.path)!r})"
