from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import attrs
import pytest

from cargo_pprof.model import ExitStatus, ProcessResult


@attrs.define
class Call:
    program: str
    args: list[str]
    streams: dict[str, Any]

    @property
    def stage(self) -> str:
        if self.program == "perf":
            return f"perf {self.args[0]}"
        return self.program


@attrs.define
class SpyRunner:
    """Stands in for `run_process`: records every call and replays scripted results."""

    build_stdout: bytes = b""
    returncodes: dict[str, int] = attrs.field(factory=dict)
    trace_text: str = "app 123 [000] 1.0: cycles:\n"
    calls: list[Call] = attrs.field(factory=list)

    def __call__(
        self,
        program: str,
        args: Sequence[str],
        *,
        stdin: Any = "inherit",
        stdout: Any = "inherit",
        stderr: Any = "inherit",
    ) -> ProcessResult:
        call = Call(program=program, args=list(args), streams={"stdin": stdin, "stdout": stdout, "stderr": stderr})
        self.calls.append(call)
        status = ExitStatus.from_returncode(self.returncodes.get(call.stage, 0))
        if isinstance(stdout, Path):
            stdout.write_text(self.trace_text)
        return ProcessResult(status=status, stdout=self.build_stdout if stdout == "capture" else None)

    @property
    def stages(self) -> list[str]:
        return [c.stage for c in self.calls]


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    d = tmp_path / "target" / "profiling"
    d.mkdir(parents=True)
    return d


@pytest.fixture
def spy(out_dir: Path) -> SpyRunner:
    lines = [
        '{"reason":"compiler-artifact","executable":null}',
        f'{{"reason":"compiler-artifact","executable":"{out_dir / "app"}"}}',
        '{"reason":"build-finished","success":true}',
    ]
    return SpyRunner(build_stdout=("\n".join(lines) + "\n").encode())


@pytest.fixture
def make_spy() -> type[SpyRunner]:
    return SpyRunner
