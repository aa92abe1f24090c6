"""Message sinks for fault reports: plain/colored lines or one JSON document."""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from colorama import Fore, Style

from .faults import FaultReport


def _is_truthy_env(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


class ConsoleReporter:
    """Writes one human-readable line per banner, report and note."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = False) -> None:
        self._stream = stream
        self.use_color = use_color

    @property
    def stream(self) -> TextIO:
        # Looked up on every write; sys.stdout may be swapped after construction.
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()

    def banner(self, text: str) -> None:
        if self.use_color:
            self._write(f"{Fore.CYAN}{text}{Style.RESET_ALL}")
        else:
            self._write(text)

    def report(self, report: FaultReport) -> None:
        if self.use_color:
            self._write(f"{Fore.YELLOW}{report.kind.label}{Style.RESET_ALL} caught: {report.message}")
        else:
            self._write(report.line)

    def note(self, scenario: str, text: str) -> None:
        if self.use_color:
            self._write(f"{Style.DIM}{text}{Style.RESET_ALL}")
        else:
            self._write(text)

    def finish(self) -> None:
        pass


class JsonReporter:
    """Collects everything and writes a single JSON document on finish()."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self.banner_text: Optional[str] = None
        self.reports: List[FaultReport] = []
        self.notes: List[Dict[str, str]] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def banner(self, text: str) -> None:
        self.banner_text = text

    def report(self, report: FaultReport) -> None:
        self.reports.append(report)

    def note(self, scenario: str, text: str) -> None:
        self.notes.append({"scenario": scenario, "text": text})

    def to_dict(self) -> Dict[str, Any]:
        kinds: Dict[str, int] = {}
        io_reports = 0
        for report in self.reports:
            kinds[report.kind.label] = kinds.get(report.kind.label, 0) + 1
            if report.kind.is_io:
                io_reports += 1
        return {
            "banner": self.banner_text,
            "reports": [r.to_dict() for r in self.reports],
            "notes": self.notes,
            "counts": {
                "reports": len(self.reports),
                "notes": len(self.notes),
                "io": io_reports,
                "kinds": kinds,
            },
        }

    def finish(self) -> None:
        self.stream.write(json.dumps(self.to_dict(), indent=2) + "\n")
        self.stream.flush()


def create_reporter(json_output: bool = False, no_color: bool = False,
                    stream: Optional[TextIO] = None):
    """
    Return a reporter suitable for this terminal.

    Colors are used only on interactive terminals, and never when
    NO_COLOR / FAULTDEMO_NO_COLOR is set.
    """
    if json_output:
        return JsonReporter(stream=stream)

    target = stream if stream is not None else sys.stdout
    is_tty = hasattr(target, "isatty") and target.isatty()
    env_no_color = os.getenv("NO_COLOR") is not None or _is_truthy_env(os.getenv("FAULTDEMO_NO_COLOR"))
    use_color = is_tty and not no_color and not env_no_color
    return ConsoleReporter(stream=stream, use_color=use_color)
