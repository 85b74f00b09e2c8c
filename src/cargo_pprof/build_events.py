"""
Parse Cargo's `--message-format=json` output.

Cargo writes one JSON object per line to stdout. Only `compiler-artifact`
records carry an `executable` key, and it is `null` for libraries and build
scripts' metadata. Non-JSON lines (from wrappers or misbehaving build scripts)
may be interleaved and are skipped.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any

from jsonschema import Draft202012Validator

from .errors import ExecutableNotFoundError
from .model import BuildEvent

BUILD_EVENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "executable": {"type": ["string", "null"]},
    },
}

_VALIDATOR = Draft202012Validator(BUILD_EVENT_SCHEMA)


def decode_lines(stdout: bytes) -> list[str]:
    return stdout.decode("utf-8", errors="replace").splitlines()


def _parse_line(line: str) -> BuildEvent | None:
    try:
        record = json.loads(line)
    except (ValueError, RecursionError):
        return None
    if not _VALIDATOR.is_valid(record):
        return None
    return BuildEvent(executable=record.get("executable"))


def iter_build_events(lines: Iterable[str]) -> Iterator[BuildEvent]:
    """Lazily yield the well-formed build events in `lines`, skipping everything else."""
    for line in lines:
        event = _parse_line(line)
        if event is not None:
            yield event


def find_executable(lines: Iterable[str]) -> str:
    """Return the executable named by the last build event that has one.

    A build can report several executables (e.g. build-script runners before the
    final target); the last one in emission order is the binary to profile.
    """
    executable: str | None = None
    for event in iter_build_events(lines):
        if event.executable is not None:
            executable = event.executable
    if executable is None:
        raise ExecutableNotFoundError()
    return executable
