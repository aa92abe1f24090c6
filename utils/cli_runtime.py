"""CLI/runtime bootstrap helpers for the faultdemo command."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any


def configure_windows_console_utf8() -> None:
    """Best-effort UTF-8 console setup for Windows terminals."""
    if sys.platform != "win32":
        return

    try:
        if hasattr(sys.stdout, "reconfigure"):
            stdout: Any = sys.stdout
            stderr: Any = sys.stderr
            stdout.reconfigure(encoding="utf-8")
            stderr.reconfigure(encoding="utf-8")
        os.system("chcp 65001 >nul 2>&1")
    except (AttributeError, OSError, ValueError):
        # Terminal-dependent setup; safe fallback is default encoding.
        pass


def build_faultdemo_arg_parser() -> argparse.ArgumentParser:
    """Create the faultdemo CLI parser."""
    parser = argparse.ArgumentParser(
        prog="faultdemo",
        description="Trigger, catch and report eleven kinds of runtime faults.",
        epilog="Examples:\n"
        "  faultdemo\n"
        "  faultdemo --only divide-by-zero --only malformed-numeric-parse\n"
        "  faultdemo --json > report.json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", help="Path to config.json file")
    parser.add_argument("--list", action="store_true", help="List scenario names and exit")
    parser.add_argument(
        "--only",
        action="append",
        metavar="NAME",
        help="Run only this scenario (repeatable; registration order is kept)",
    )
    parser.add_argument("--json", action="store_true", help="Emit one JSON document instead of text lines")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors (also respects NO_COLOR/FAULTDEMO_NO_COLOR).",
    )
    parser.add_argument("--no-log", action="store_true", help="Do not write a log file")
    return parser
