"""PrefixRunner: select files once, then mutate them one by one.

Selection failures (TraversalError) propagate before any file is touched.
Per-file failures are recorded in the RunSummary and printed, and the run
continues with the next file. Progress goes to an injectable text stream.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..formatting import (
    format_file_list,
    format_finish,
    format_request_header,
    format_result,
    format_start,
    format_summary,
)
from .mutator import PrefixMutator
from .request import Operation, OperationRequest, RunSummary
from .selector import select_files

logger = logging.getLogger(__name__)


class PrefixRunner:
    """Runs one OperationRequest over its file tree.

    Usage:
        runner = PrefixRunner(out=io.StringIO())
        summary = runner.run(request)
        assert summary.failed == 0
    """

    def __init__(self, out: TextIO | None = None):
        """
        Args:
            out: Stream for progress output (defaults to sys.stdout at run time)
        """
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def run(self, request: OperationRequest) -> RunSummary:
        """Apply ``request.operation`` to every selected file.

        Returns:
            RunSummary with one MutationResult per selected file

        Raises:
            TraversalError: Root path missing or unreadable
        """
        logger.info(
            f"Running {request.operation.value} on {request.root_path} "
            f"(pattern={request.pattern!r}, with_line_end={request.with_line_end})"
        )

        if request.operation == Operation.INJECT:
            self._print(format_request_header(request.prefix, request.pattern))

        files = select_files(request.root_path, request.pattern)
        self._print(format_file_list(files))

        summary = RunSummary(operation=request.operation, files=[str(f) for f in files])

        mutator = PrefixMutator(
            request.operation,
            request.prefix_bytes(),
            with_line_end=request.with_line_end,
        )

        self._print(format_start(request.operation))
        for file_path in files:
            result = mutator.apply(file_path)
            summary.results.append(result)
            message = format_result(request.operation, result)
            if message:
                self._print(message)

        self._print(format_finish(request.operation))
        self._print(format_summary(summary))

        logger.info(
            f"{request.operation.value} finished: {summary.changed} changed, "
            f"{summary.unchanged} unchanged, {summary.failed} failed"
        )
        return summary
