"""
Uniform failure path for the pipeline.

Stages never terminate the process themselves. They raise a `PipelineError`
(directly, via `resolve`, or via `resolve_status`) and the CLI entrypoint turns
it into a single `Error: ...` line on stderr and exit code 1.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import IO, TypeVar

from .errors import PipelineError, SubprocessFailedError
from .model import ExitStatus, RunOutcome

T = TypeVar("T")

FAILURE_EXIT_CODE = 1


def resolve(fn: Callable[..., T], *args: object, **kwargs: object) -> T:
    """Call `fn` and pass its value through; I/O and decoding failures become `PipelineError`."""
    try:
        return fn(*args, **kwargs)
    except PipelineError:
        raise
    except (OSError, UnicodeError) as e:
        raise PipelineError(str(e)) from e


def resolve_status(status: ExitStatus, *, tool: str) -> None:
    """Raise `SubprocessFailedError` unless `status` denotes success."""
    if not status.success:
        raise SubprocessFailedError(tool, status)


def failure_outcome(error: PipelineError) -> RunOutcome:
    # The child's own code is only informational; this program always exits 1.
    return RunOutcome(exit_code=FAILURE_EXIT_CODE, message=error.message)


def report_failure(error: PipelineError, *, stream: IO[str] | None = None) -> int:
    """Print `error` to stderr and return the process exit code."""
    outcome = failure_outcome(error)
    print(f"Error: {outcome.message}", file=stream if stream is not None else sys.stderr)
    return outcome.exit_code
