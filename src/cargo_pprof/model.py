from __future__ import annotations

from pathlib import Path

import attrs


@attrs.define(frozen=True, slots=True)
class ExitStatus:
    """Termination status of a child process.

    `code` is None when the process was terminated abnormally (e.g. by a signal).
    """

    code: int | None
    signal: int | None = None

    @property
    def success(self) -> bool:
        return self.code == 0

    @classmethod
    def from_returncode(cls, returncode: int) -> ExitStatus:
        # subprocess reports death-by-signal N as -N.
        if returncode < 0:
            return cls(code=None, signal=-returncode)
        return cls(code=returncode)


@attrs.define(frozen=True, slots=True)
class ProcessResult:
    status: ExitStatus
    stdout: bytes | None = None


@attrs.define(frozen=True, slots=True)
class BuildEvent:
    executable: str | None = None


@attrs.define(frozen=True, slots=True)
class ArtifactPaths:
    capture_path: Path
    trace_path: Path

    def to_dict(self) -> dict[str, str]:
        return {"capture_path": str(self.capture_path), "trace_path": str(self.trace_path)}


@attrs.define(frozen=True, slots=True)
class PipelineConfig:
    open_firefox_profiler: bool = False
    ignore_exit: bool = False
    app_args: tuple[str, ...] = attrs.field(default=(), converter=tuple)
    add_profile: bool = False
    manifest_path: Path | None = None


@attrs.define(frozen=True, slots=True)
class RunOutcome:
    exit_code: int
    trace_path: Path | None = None
    message: str | None = None
