"""Entry point for the mac-healthcheck command line tool."""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .checker import HealthChecker
from .checks import CheckResult, Report
from .formatting import (
    REMEDIATION_HINT,
    TITLE,
    PlainPrinter,
    Printer,
    format_results_table,
    format_summary,
)

STATUS_STYLES = {"pass": "green", "warn": "yellow", "fail": "red"}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Verify that a provisioned development Mac has its tools and configuration in place.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="print the report as JSON instead of progress lines")
    output.add_argument("--table", action="store_true", help="print a single results table instead of progress lines")
    output.add_argument("--ui", action="store_true", help="colourful terminal output rendered with Rich")
    parser.add_argument("-v", "--verbose", action="store_true", help="log probe details to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.json or args.table:
        checker = HealthChecker()
        exit_code = checker.run()
        if args.json:
            print(json.dumps(checker.report.to_dict(), ensure_ascii=False, indent=2))
        else:
            print(format_results_table(checker.report))
            print()
            print(format_summary(checker.report))
        return exit_code

    printer: Printer = RichPrinter(Console()) if args.ui else PlainPrinter()
    return HealthChecker(printer=printer).run()


class RichPrinter(Printer):
    """Streams coloured progress lines and renders the summary as panels."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def banner(self) -> None:
        self.console.print(Panel(TITLE, style="bold cyan"))

    def section(self, title: str) -> None:
        self.console.rule(f"[bold]{title}")

    def result(self, result: CheckResult) -> None:
        style = STATUS_STYLES[result.status]
        self.console.print(f"[{style}]{result.glyph}[/{style}] {escape(result.label)}", highlight=False)

    def end_section(self) -> None:
        self.console.print()

    def summary(self, report: Report) -> None:
        if report.missing_tools:
            missing = Table(title="Missing tools", box=box.SIMPLE_HEAD)
            missing.add_column("Tool", style="bold red")
            missing.add_column("Section")
            for result in report.results:
                if result.status == "fail":
                    missing.add_row(result.check.name, result.section)
            self.console.print(missing)
            self.console.print(
                Panel(f"Run the Ansible playbook to install missing tools:\n  {REMEDIATION_HINT}", style="bold red")
            )
        else:
            self.console.print(Panel("All essential tools are installed!", style="bold green"))

        if report.warnings:
            warnings = Table(title="Warnings", box=box.SIMPLE_HEAD, show_header=False)
            warnings.add_column("Warning", style="yellow")
            for warning in report.warnings:
                warnings.add_row(escape(warning))
            self.console.print(warnings)


if __name__ == "__main__":
    raise SystemExit(main())
