"""Prefix engine: file selection and idempotent prefix mutation.

Key Components:

- select_files: Recursive walk with base-name glob matching
- inject / remove: Single-file prefix mutation on raw bytes
- PrefixMutator: Applies one operation and reports a MutationResult
- PrefixRunner: Selector + mutator loop with console progress
- resolve_prefix: --prefix / --prefix-file resolution
- OperationRequest / RunSummary: Pydantic v2 request and result models
- IOResult: Error monad for file I/O helpers
"""

from .exceptions import (
    ArgumentError,
    ConfigError,
    FileMutationError,
    PrefixerError,
    PrefixSourceError,
    TraversalError,
)
from .file_ops import FileOperations
from .io_result import IOResult, IOStatus
from .mutator import PrefixMutator, add_prefix, inject, remove, strip_prefix
from .prefix_source import load_prefix_file, resolve_prefix
from .request import (
    MutationResult,
    MutationStatus,
    Operation,
    OperationRequest,
    RunSummary,
)
from .runner import PrefixRunner
from .selector import select_files

__all__ = [
    # Errors
    "PrefixerError",
    "ArgumentError",
    "ConfigError",
    "FileMutationError",
    "PrefixSourceError",
    "TraversalError",
    # I/O
    "IOResult",
    "IOStatus",
    "FileOperations",
    # Models
    "Operation",
    "OperationRequest",
    "MutationStatus",
    "MutationResult",
    "RunSummary",
    # Operations
    "select_files",
    "inject",
    "remove",
    "add_prefix",
    "strip_prefix",
    "PrefixMutator",
    "load_prefix_file",
    "resolve_prefix",
    "PrefixRunner",
]
