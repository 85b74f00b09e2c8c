from __future__ import annotations

import contextlib
import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any, Literal, Protocol

from .errors import OutputFileError, ToolLaunchError
from .model import ExitStatus, ProcessResult

log = logging.getLogger(__name__)

INHERIT: Literal["inherit"] = "inherit"
CAPTURE: Literal["capture"] = "capture"

StreamMode = Literal["inherit", "capture"] | Path


class ProcessRunner(Protocol):
    def __call__(
        self,
        program: str,
        args: Sequence[str],
        *,
        stdin: StreamMode = INHERIT,
        stdout: StreamMode = INHERIT,
        stderr: StreamMode = INHERIT,
    ) -> ProcessResult: ...


def render_command(program: str, args: Sequence[str]) -> str:
    return shlex.join([program, *args])


def _open_stream(mode: StreamMode, stack: contextlib.ExitStack, *, for_input: bool) -> Any:
    if mode == INHERIT:
        return None
    if mode == CAPTURE:
        if for_input:
            raise ValueError("stdin cannot be captured")
        return subprocess.PIPE
    if for_input:
        raise ValueError("stdin cannot be redirected from a file")
    path = Path(mode)
    try:
        f: IO[bytes] = stack.enter_context(path.open("wb"))
    except OSError as e:
        raise OutputFileError(path, e) from e
    return f


def run_process(
    program: str,
    args: Sequence[str],
    *,
    stdin: StreamMode = INHERIT,
    stdout: StreamMode = INHERIT,
    stderr: StreamMode = INHERIT,
) -> ProcessResult:
    """Run `program` to completion and return its status (and captured stdout, if requested).

    Each stream is either inherited from this process, captured in memory, or
    redirected into a file (created or truncated). Raises `ToolLaunchError` when
    the program cannot be started and `OutputFileError` when a redirect target
    cannot be opened.
    """
    argv = [program, *args]
    log.debug("Running: %s", render_command(program, args))

    with contextlib.ExitStack() as stack:
        stdin_arg = _open_stream(stdin, stack, for_input=True)
        stdout_arg = _open_stream(stdout, stack, for_input=False)
        stderr_arg = _open_stream(stderr, stack, for_input=False)
        try:
            proc = subprocess.Popen(argv, stdin=stdin_arg, stdout=stdout_arg, stderr=stderr_arg)
        except OSError as e:
            raise ToolLaunchError(program, e) from e
        # Popen.__exit__ waits for the child and never kills it.
        with proc:
            try:
                out, _ = proc.communicate()
            except KeyboardInterrupt:
                # Ctrl-C reaches the child too; let it finish writing its output.
                log.info("Interrupted, waiting for %s to exit", program)
                out, _ = proc.communicate()

    status = ExitStatus.from_returncode(proc.returncode)
    log.debug("%s exited with %s", program, status)
    return ProcessResult(status=status, stdout=out if stdout == CAPTURE else None)
