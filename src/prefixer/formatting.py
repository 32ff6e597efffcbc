"""Console text for progress reporting.

Every user-facing line the runner prints is built here so wording stays in
one place. Functions return strings (one or more lines, no trailing newline).
"""

from pathlib import Path

from .engine.request import MutationResult, Operation, RunSummary

_NOUNS = {
    Operation.INJECT: "injection",
    Operation.REMOVE: "removal",
}


def format_request_header(prefix: str, pattern: str) -> str:
    """Echo the prefix and pattern in use."""
    return f"Prefix  {prefix}\nPattern  {pattern}"


def format_file_list(files: list[Path]) -> str:
    """Format the selector result.

    Args:
        files: Selected file paths in walk order

    Returns:
        "No files ..." message, or a count header followed by one bullet per file
    """
    if not files:
        return "No files matching the pattern found"

    header = f"Found {len(files)} files matching the pattern: "
    bullets = "\n".join(f"  • {f}" for f in files)
    return f"{header}\n{bullets}"


def format_start(operation: Operation) -> str:
    return f"\nStarting {_NOUNS[operation]}\n"


def format_finish(operation: Operation) -> str:
    return f"\n{_NOUNS[operation].capitalize()} finished"


def format_result(operation: Operation, result: MutationResult) -> str | None:
    """Per-file notice, or None when the file was changed (changes are silent).

    Args:
        operation: The operation that produced ``result``
        result: Outcome for one file

    Returns:
        Message for unchanged and failed files, None otherwise
    """
    if result.status.is_changed():
        return None

    if result.status.is_failed():
        if operation == Operation.INJECT:
            return f"Error injecting prefix to file {result.path}: {result.error}"
        return f"Error removing prefix from file {result.path}: {result.error}"

    if operation == Operation.INJECT:
        return f"File {result.path} already has the prefix"
    return f"File {result.path} did not have the prefix"


def format_summary(summary: RunSummary) -> str:
    """One-line count of changed, unchanged and failed files."""
    return (
        f"{summary.changed} changed, {summary.unchanged} unchanged, "
        f"{summary.failed} failed ({len(summary.files)} files)"
    )
