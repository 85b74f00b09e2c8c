from __future__ import annotations

import re
from pathlib import Path

from .errors import ManifestError
from .toolchain import PROFILE_NAME

DEFAULT_MANIFEST = Path("Cargo.toml")

PROFILE_SNIPPET = f"""
[profile.{PROFILE_NAME}]
inherits = "release"
debug = true
"""

_PROFILE_HEADER_RE = re.compile(rf"^\s*\[\s*profile\s*\.\s*{PROFILE_NAME}\s*\]", re.MULTILINE)


def has_profile(text: str) -> bool:
    return _PROFILE_HEADER_RE.search(text) is not None


def add_profile(manifest_path: Path | None = None) -> Path:
    """Append the profiling build profile to a Cargo manifest and return its path."""
    path = DEFAULT_MANIFEST if manifest_path is None else manifest_path
    if not path.is_file():
        raise ManifestError(f"Manifest not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManifestError(f"{path} is not valid UTF-8: {e.reason} at byte {e.start}") from e
    if has_profile(text):
        raise ManifestError(f"{path} already defines [profile.{PROFILE_NAME}]")

    with path.open("a", encoding="utf-8") as f:
        if text and not text.endswith("\n"):
            f.write("\n")
        f.write(PROFILE_SNIPPET)
    return path
