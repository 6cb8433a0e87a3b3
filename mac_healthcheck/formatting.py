"""Console-friendly formatting utilities."""

from __future__ import annotations

import sys
from typing import List, Sequence, TextIO

from .checks import FAIL_GLYPH, PASS_GLYPH, WARN_GLYPH, CheckResult, Report

RULE = "=" * 38
TITLE = "Mac Dev Environment Health Check"
REMEDIATION_HINT = "ansible-playbook main.yml --ask-become-pass"


def format_result_line(result: CheckResult) -> str:
    return f"{result.glyph} {result.label}"


def format_section_header(title: str) -> str:
    return f"=== {title} ==="


def format_banner() -> str:
    return "\n".join([RULE, TITLE, RULE, ""])


def format_summary(report: Report) -> str:
    lines: List[str] = [RULE, "Summary", RULE]
    missing = report.missing_tools
    if not missing:
        lines.append(f"{PASS_GLYPH} All essential tools are installed!")
    else:
        lines.append(f"{FAIL_GLYPH} Missing tools:")
        lines.extend(f"  - {name}" for name in missing)
        lines.append("")
        lines.append("Run the Ansible playbook to install missing tools:")
        lines.append(f"  {REMEDIATION_HINT}")

    warnings = report.warnings
    if warnings:
        lines.append("")
        lines.append(f"{WARN_GLYPH} Warnings:")
        lines.extend(f"  - {warning}" for warning in warnings)

    lines.extend(
        [
            "",
            "For detailed setup instructions, see:",
            "  - README.md for installation",
            "  - TROUBLESHOOTING.md for common issues",
        ]
    )
    return "\n".join(lines)


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = [len(h) for h in headers]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))
    lines = []
    lines.append(_format_row(headers, widths))
    lines.append(_format_row(["-" * w for w in widths], widths))
    for row in rows:
        lines.append(_format_row(row, widths))
    return "\n".join(lines)


def format_results_table(report: Report) -> str:
    rows = [
        [result.section, result.check.name, f"{result.glyph} {result.status}", result.detail or "-"]
        for result in report.results
    ]
    return render_table(["Section", "Check", "Status", "Detail"], rows) if rows else "No checks ran"


def _format_row(row: Sequence[str], widths: Sequence[int]) -> str:
    padded = [cell.ljust(width) for cell, width in zip(row, widths)]
    return " | ".join(padded).rstrip()


class Printer:
    """Receives progress events from a run; the base class discards them."""

    def banner(self) -> None:
        pass

    def section(self, title: str) -> None:
        pass

    def result(self, result: CheckResult) -> None:
        pass

    def end_section(self) -> None:
        pass

    def summary(self, report: Report) -> None:
        pass


class PlainPrinter(Printer):
    """Writes the classic line-per-check transcript."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def _write(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout, flush=True)

    def banner(self) -> None:
        self._write(format_banner())

    def section(self, title: str) -> None:
        self._write(format_section_header(title))

    def result(self, result: CheckResult) -> None:
        self._write(format_result_line(result))

    def end_section(self) -> None:
        self._write("")

    def summary(self, report: Report) -> None:
        self._write(format_summary(report))
        self._write("")
