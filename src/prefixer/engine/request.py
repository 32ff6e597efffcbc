"""Operation request and result models.

An OperationRequest is built once per invocation from CLI arguments and
configuration and is immutable afterwards. The runner produces one
MutationResult per selected file and a RunSummary for the whole run.
"""

from __future__ import annotations

import codecs
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)


class Operation(str, Enum):
    """Which mutation to apply to every selected file."""

    INJECT = "inject"
    REMOVE = "remove"


class MutationStatus(str, Enum):
    """Tri-state outcome of mutating one file."""

    CHANGED = "changed"
    """Prefix was added or removed and the file was rewritten."""

    UNCHANGED = "unchanged"
    """File already in the desired state; nothing written."""

    FAILED = "failed"
    """File could not be read or written."""

    def is_changed(self) -> bool:
        """Check if the file was rewritten."""
        return self == MutationStatus.CHANGED

    def is_unchanged(self) -> bool:
        """Check if the file was left alone."""
        return self == MutationStatus.UNCHANGED

    def is_failed(self) -> bool:
        """Check if the mutation failed."""
        return self == MutationStatus.FAILED


class OperationRequest(BaseModel):
    """Everything needed to run inject or remove over a tree."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation: Operation = Field(description="inject or remove")
    root_path: str = Field(min_length=1, description="Directory (or file) to walk")
    prefix: str = Field(min_length=1, description="Literal prefix text, may span lines")
    pattern: str = Field(default="*", description="Shell glob applied to file base names")
    with_line_end: bool = Field(
        default=False,
        description="Inject: add one line break after prefix. Remove: strip one after it.",
    )
    encoding: str = Field(default="utf-8", description="Encoding used to turn prefix into bytes")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("pattern")
    @classmethod
    def default_empty_pattern(cls, v: str) -> str:
        """An empty pattern would match nothing; treat it as match-all."""
        return v or "*"

    @model_validator(mode="after")
    def validate_prefix_encodable(self) -> OperationRequest:
        """The prefix must be representable in the target encoding."""
        try:
            self.prefix.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise ValueError(f"Prefix cannot be encoded as {self.encoding}: {e}") from e
        return self

    def prefix_bytes(self) -> bytes:
        """Encoded prefix used for the byte-level comparison."""
        return self.prefix.encode(self.encoding)


class MutationResult(BaseModel):
    """Outcome of one inject/remove on one file."""

    path: str = Field(description="File that was processed")
    status: MutationStatus = Field(description="changed, unchanged or failed")
    error: str | None = Field(default=None, description="Error message when failed")


class RunSummary(BaseModel):
    """Everything that happened during a single invocation."""

    operation: Operation
    files: list[str] = Field(default_factory=list, description="Selected files in walk order")
    results: list[MutationResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def changed(self) -> int:
        """Number of files rewritten."""
        return sum(1 for r in self.results if r.status.is_changed())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def unchanged(self) -> int:
        """Number of files already in the desired state."""
        return sum(1 for r in self.results if r.status.is_unchanged())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        """Number of files that could not be processed."""
        return sum(1 for r in self.results if r.status.is_failed())
