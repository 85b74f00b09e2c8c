from __future__ import annotations

import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path

from cargo_pprof import manifest

MAIN_RS = """\
fn fib(n: u64) -> u64 {
    if n < 2 { n } else { fib(n - 1) + fib(n - 2) }
}

fn main() {
    let n: u64 = std::env::args().nth(1).and_then(|a| a.parse().ok()).unwrap_or(30);
    println!("fib({}) = {}", n, fib(n));
}
"""


def main() -> int:
    cargo = shutil.which("cargo")
    if cargo is None or shutil.which("perf") is None:
        print("Skipping: requires cargo and perf on PATH")
        return 0

    with tempfile.TemporaryDirectory(prefix="cargo-pprof-smoke-") as tmp:
        crate = Path(tmp) / "fib"
        subprocess.check_call([cargo, "new", "--quiet", "--bin", str(crate)])
        (crate / "src" / "main.rs").write_text(MAIN_RS)
        manifest.add_profile(crate / "Cargo.toml")

        env = {**os.environ, "CARGO": cargo}
        cmd = [sys.executable, "-m", "cargo_pprof", "pprof", "--", "32"]
        rc = subprocess.call(cmd, cwd=crate, env=env)

        trace = crate / "target" / "profiling" / "perf.trace"
        print(f"Trace: {trace} ({trace.stat().st_size if trace.exists() else 0} bytes)")
        return rc


if __name__ == "__main__":
    raise SystemExit(main())
