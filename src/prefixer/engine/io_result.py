"""IOResult for whole-file read and write operations.

File helpers in ``file_ops`` never raise; they return an IOResult so the
caller decides whether a failure aborts the run (prefix source, traversal)
or is only recorded (per-file mutation).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class IOStatus(str, Enum):
    """Status of a single file I/O operation."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class IOResult(Generic[T]):  # noqa: UP046
    """
    Success/failure carrier for file I/O.

    Usage:
        result = FileOperations.read_bytes(path)
        if result.is_success:
            content = result.value
        else:
            print(f"Read error: {result.error}")
    """

    status: IOStatus
    value: T | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Reject inconsistent states (success without value, failure without error)."""
        if self.status == IOStatus.SUCCESS and self.value is None:
            raise ValueError("Success result must have a value")
        if self.status == IOStatus.FAILED and not self.error:
            raise ValueError("Failed result must have an error message")

    @property
    def is_success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status == IOStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the operation failed."""
        return self.status == IOStatus.FAILED

    @classmethod
    def success(cls, value: T) -> "IOResult[T]":
        """Create a successful result holding ``value``."""
        return cls(status=IOStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: str) -> "IOResult[T]":
        """Create a failed result holding an error message."""
        return cls(status=IOStatus.FAILED, error=error)

    def unwrap(self) -> T:
        """Get value or raise ValueError if failed.

        Note that an empty ``bytes`` value is a valid success: empty files
        are read and written like any other.
        """
        if not self.is_success or self.value is None:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value
