"""
Failure taxonomy for the profiling pipeline.

Every error is fatal: it is raised where the condition is detected and handled
exactly once by the CLI entrypoint, which prints the message and exits with 1.
"""

from __future__ import annotations

from pathlib import Path

from .model import ExitStatus


class PipelineError(Exception):
    """Base class for all fatal pipeline conditions."""

    @property
    def message(self) -> str:
        return str(self)


# Environment errors


class MissingEnvironmentError(PipelineError):
    def __init__(self, name: str) -> None:
        super().__init__(f"environment variable {name} is not set (run this tool as `cargo pprof`)")
        self.name = name


class ToolLaunchError(PipelineError):
    def __init__(self, program: str, cause: OSError) -> None:
        super().__init__(f"Failed to start {program}: {cause.strerror or cause}")
        self.program = program
        self.cause = cause


# Subprocess failures


class SubprocessFailedError(PipelineError):
    def __init__(self, tool: str, status: ExitStatus) -> None:
        if status.code is not None:
            msg = f"{tool} returned with exit code {status.code}"
        elif status.signal is not None:
            msg = f"{tool} returned with an error (terminated by signal {status.signal})"
        else:
            msg = f"{tool} returned with an error"
        super().__init__(msg)
        self.tool = tool
        self.status = status


# Protocol errors


class ExecutableNotFoundError(PipelineError):
    def __init__(self) -> None:
        super().__init__("Could not find executable")


# Filesystem errors


class OutputDirectoryError(PipelineError):
    def __init__(self, executable: str) -> None:
        super().__init__(f"Could not determine output directory for executable: {executable!r}")
        self.executable = executable


class OutputFileError(PipelineError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to create {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ManifestError(PipelineError):
    pass


class RunInterruptedError(PipelineError):
    def __init__(self) -> None:
        super().__init__("interrupted")
