from __future__ import annotations

import logging
from collections.abc import Mapping

from . import build_events, console, manifest, paths, toolchain
from .model import ArtifactPaths, PipelineConfig, RunOutcome
from .outcome import resolve, resolve_status
from .runner import CAPTURE, INHERIT, ProcessRunner, run_process

log = logging.getLogger(__name__)


def open_firefox_profiler(*, runner: ProcessRunner) -> None:
    result = runner(toolchain.BROWSER, toolchain.build_browser_args())
    resolve_status(result.status, tool=toolchain.BROWSER)


def build(config: PipelineConfig, *, cargo: str, runner: ProcessRunner) -> tuple[str, ArtifactPaths]:
    """Build the crate and return (executable, artifact paths next to it)."""
    console.print_step("Building binary")
    result = runner(
        cargo,
        toolchain.build_cargo_build_args(manifest_path=config.manifest_path),
        stdout=CAPTURE,
        stderr=INHERIT,
    )
    resolve_status(result.status, tool="cargo")

    executable = build_events.find_executable(build_events.decode_lines(result.stdout or b""))
    artifacts = paths.artifact_paths(executable)
    log.debug("Artifact paths: %s", artifacts.to_dict())
    console.print_note(f"Binary found: {executable}")
    return executable, artifacts


def capture(config: PipelineConfig, *, executable: str, artifacts: ArtifactPaths, runner: ProcessRunner) -> None:
    console.print_step("Running program with perf")
    result = runner(
        toolchain.PERF,
        toolchain.build_perf_record_args(
            capture_path=artifacts.capture_path,
            executable=executable,
            app_args=config.app_args,
        ),
    )
    if config.ignore_exit:
        if not result.status.success:
            log.info("Ignoring exit status of profiled program: %s", result.status)
        return
    resolve_status(result.status, tool="perf record")


def convert(*, artifacts: ArtifactPaths, runner: ProcessRunner) -> None:
    console.print_step("Converting data to trace format")
    result = runner(
        toolchain.PERF,
        toolchain.build_perf_script_args(capture_path=artifacts.capture_path),
        stdout=artifacts.trace_path,
    )
    resolve_status(result.status, tool="perf script")


def run(
    config: PipelineConfig,
    *,
    runner: ProcessRunner | None = None,
    env: Mapping[str, str] | None = None,
) -> RunOutcome:
    """Run build -> capture -> convert and report the trace location.

    Any failure raises `PipelineError`; nothing after the failing stage runs.
    """
    runner = run_process if runner is None else runner

    if config.open_firefox_profiler:
        open_firefox_profiler(runner=runner)
        return RunOutcome(exit_code=0)

    if config.add_profile:
        path = resolve(manifest.add_profile, config.manifest_path)
        console.print_note(f"Added [profile.{toolchain.PROFILE_NAME}] to {path}")
        return RunOutcome(exit_code=0)

    cargo = toolchain.resolve_cargo(env)

    executable, artifacts = build(config, cargo=cargo, runner=runner)
    capture(config, executable=executable, artifacts=artifacts, runner=runner)
    convert(artifacts=artifacts, runner=runner)

    console.print_report(artifacts.trace_path)
    return RunOutcome(exit_code=0, trace_path=artifacts.trace_path)
