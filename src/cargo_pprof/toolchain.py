from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from .errors import MissingEnvironmentError

CARGO_ENV_VAR = "CARGO"
PERF = "perf"
BROWSER = "firefox"

PROFILE_NAME = "profiling"
SAMPLE_FREQUENCY_HZ = 999
FIREFOX_PROFILER_URL = "https://profiler.firefox.com"


def resolve_cargo(env: Mapping[str, str] | None = None) -> str:
    """Return the cargo executable Cargo exported for this subcommand.

    Cargo sets `CARGO` when it runs `cargo-<name>` subcommands, so using it picks
    the same toolchain the user invoked rather than whatever `cargo` is on PATH.
    """
    env = os.environ if env is None else env
    cargo = env.get(CARGO_ENV_VAR)
    if not cargo:
        raise MissingEnvironmentError(CARGO_ENV_VAR)
    return cargo


def build_cargo_build_args(*, manifest_path: Path | None = None) -> list[str]:
    args = [
        "build",
        "--message-format=json-render-diagnostics",
        f"--profile={PROFILE_NAME}",
    ]
    if manifest_path is not None:
        args.append(f"--manifest-path={manifest_path}")
    return args


def build_perf_record_args(*, capture_path: Path, executable: str, app_args: Sequence[str]) -> list[str]:
    return [
        "record",
        f"--output={capture_path}",
        "-g",
        "-F",
        str(SAMPLE_FREQUENCY_HZ),
        executable,
        *app_args,
    ]


def build_perf_script_args(*, capture_path: Path) -> list[str]:
    return ["script", "-F", "+pid", f"--input={capture_path}"]


def build_browser_args() -> list[str]:
    return [FIREFOX_PROFILER_URL]
