"""
Build, profile and trace a Cargo binary in one step.

This package drives three external tools in sequence: `cargo build` with a
dedicated `profiling` profile, `perf record` around the produced executable,
and `perf script` to convert the capture into a text trace that the Firefox
Profiler can open.
"""

from __future__ import annotations

__version__ = "0.1.0"
