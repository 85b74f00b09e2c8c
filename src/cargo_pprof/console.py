"""Terminal output: step banners and progress on stderr, the final report on stdout."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .toolchain import FIREFOX_PROFILER_URL

err_console = Console(stderr=True, highlight=False)
out_console = Console(highlight=False)


def configure_logging(*, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    logging.basicConfig(level=level, handlers=[handler], format="%(message)s", force=True)


def print_step(desc: str) -> None:
    err_console.print(soft_wrap=True)
    err_console.print(f"=> {desc}", style="bold green", markup=False, soft_wrap=True)


def print_note(msg: str) -> None:
    err_console.print(msg, markup=False, soft_wrap=True)


def print_report(trace_path: Path) -> None:
    out_console.print("Trace file: ", end="", markup=False, soft_wrap=True)
    out_console.print(str(trace_path), style="cyan", markup=False, soft_wrap=True)
    out_console.print(
        f"This file can be viewed using the Firefox Profiler ([bright_blue]{FIREFOX_PROFILER_URL}[/bright_blue])",
        soft_wrap=True,
    )
