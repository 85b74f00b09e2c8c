from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__, console, workflow
from .errors import PipelineError, RunInterruptedError
from .model import PipelineConfig
from .outcome import report_failure


def _abs_path(p: str) -> Path:
    return Path(p).expanduser().resolve()


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser; Cargo invokes `cargo-pprof pprof ...` for `cargo pprof ...`."""
    parser = argparse.ArgumentParser(
        prog="cargo",
        description="Cargo subcommands for profiling Rust applications.",
        usage="cargo pprof [options] [-- <app args>...]",
    )
    parser.add_argument("--version", action="version", version=f"cargo-pprof {__version__}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    pprof = sub.add_parser(
        "pprof",
        help="Profile Rust applications with perf.",
        description=(
            "Build the crate with the `profiling` profile, record it with `perf record` "
            "and convert the samples for the Firefox Profiler. "
            "Arguments after `--` are passed to the profiled application."
        ),
    )
    pprof.add_argument("-o", "--open-firefox-profiler", action="store_true", help="Open the Firefox Profiler and exit.")
    pprof.add_argument("-i", "--ignore-exit", action="store_true", help="Ignore exit code of the profiled application.")
    pprof.add_argument(
        "-a",
        "--add-profile",
        action="store_true",
        help="Append the [profile.profiling] section to the manifest and exit.",
    )
    pprof.add_argument(
        "--manifest-path",
        type=_abs_path,
        default=None,
        help="Path to Cargo.toml (default: ./Cargo.toml).",
    )
    pprof.add_argument("-v", "--verbose", action="store_true", help="Log the commands being run.")
    pprof.add_argument("-V", "--version", action="version", version=f"cargo-pprof {__version__}")

    return parser


def split_app_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first `--`; everything after it belongs to the profiled application."""
    if "--" in argv:
        idx = argv.index("--")
        return argv[:idx], argv[idx + 1 :]
    return argv, []


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns process exit code."""
    own_args, app_args = split_app_args(list(sys.argv[1:] if argv is None else argv))
    parser = build_parser()
    ns = parser.parse_args(own_args)

    if ns.cmd != "pprof":
        raise AssertionError(f"Unhandled cmd: {ns.cmd}")

    console.configure_logging(verbose=ns.verbose)
    config = PipelineConfig(
        open_firefox_profiler=ns.open_firefox_profiler,
        ignore_exit=ns.ignore_exit,
        app_args=app_args,
        add_profile=ns.add_profile,
        manifest_path=ns.manifest_path,
    )
    try:
        outcome = workflow.run(config)
    except PipelineError as e:
        return report_failure(e)
    except KeyboardInterrupt:
        return report_failure(RunInterruptedError())
    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
