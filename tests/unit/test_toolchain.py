from __future__ import annotations

from pathlib import Path

import pytest

from cargo_pprof import toolchain
from cargo_pprof.errors import MissingEnvironmentError


def test_resolve_cargo_from_env() -> None:
    assert toolchain.resolve_cargo({"CARGO": "/home/u/.cargo/bin/cargo"}) == "/home/u/.cargo/bin/cargo"


@pytest.mark.parametrize("env", [{}, {"CARGO": ""}])
def test_resolve_cargo_missing(env: dict[str, str]) -> None:
    with pytest.raises(MissingEnvironmentError, match="CARGO"):
        toolchain.resolve_cargo(env)


def test_cargo_build_args() -> None:
    assert toolchain.build_cargo_build_args() == [
        "build",
        "--message-format=json-render-diagnostics",
        "--profile=profiling",
    ]
    args = toolchain.build_cargo_build_args(manifest_path=Path("/w/Cargo.toml"))
    assert args[-1] == "--manifest-path=/w/Cargo.toml"


def test_perf_record_args_preserve_app_argv() -> None:
    args = toolchain.build_perf_record_args(
        capture_path=Path("/o/perf.data"),
        executable="/o/app",
        app_args=["--", "-x", "a b"],
    )
    assert args == ["record", "--output=/o/perf.data", "-g", "-F", "999", "/o/app", "--", "-x", "a b"]


def test_perf_script_args() -> None:
    assert toolchain.build_perf_script_args(capture_path=Path("/o/perf.data")) == [
        "script",
        "-F",
        "+pid",
        "--input=/o/perf.data",
    ]
