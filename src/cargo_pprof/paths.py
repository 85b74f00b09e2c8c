from __future__ import annotations

import os
from pathlib import Path

from .errors import OutputDirectoryError
from .model import ArtifactPaths

CAPTURE_FILE_NAME = "perf.data"
TRACE_FILE_NAME = "perf.trace"


def output_dir(executable: str | os.PathLike[str]) -> Path:
    """Return the directory containing `executable`.

    A bare file name has no directory component and is rejected, as are the empty
    path and a filesystem root.
    """
    raw = os.fspath(executable)
    parent = os.path.dirname(raw)
    if not parent or not os.path.basename(raw):
        raise OutputDirectoryError(raw)
    return Path(parent)


def artifact_paths(executable: str | os.PathLike[str]) -> ArtifactPaths:
    d = output_dir(executable)
    return ArtifactPaths(capture_path=d / CAPTURE_FILE_NAME, trace_path=d / TRACE_FILE_NAME)
