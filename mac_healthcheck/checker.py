"""Run the check catalog in order and accumulate a report."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from .catalog import CATALOG
from .checks import Check, CheckKind, CheckResult, Report, Section
from .environment import Environment, gather_environment
from .formatting import Printer

logger = logging.getLogger(__name__)


class HealthChecker:
    """Executes every check of a catalog and reports as it goes.

    Checks never short-circuit: a failing or erroring check is recorded and the
    next one runs. Each status line goes to the printer as soon as the check
    completes.
    """

    def __init__(
        self,
        catalog: Sequence[Section] = CATALOG,
        environment: Optional[Environment] = None,
        printer: Optional[Printer] = None,
    ) -> None:
        self.catalog = catalog
        self.environment = environment or gather_environment()
        self.printer = printer or Printer()
        self.report = Report()

    def run(self) -> int:
        self.report = Report()
        self.printer.banner()
        for section in self.catalog:
            self.printer.section(section.title)
            for check in section.checks:
                result = self.run_check(check, section=section.title)
                self.report.add(result)
            self.printer.end_section()
        self.report.finalize()
        self.printer.summary(self.report)
        return self.report.exit_code

    def run_check(self, check: Check, section: str = "") -> CheckResult:
        target = None
        try:
            if check.kind in (CheckKind.FILE, CheckKind.DIRECTORY):
                target = str(self.environment.resolve(str(check.target)))
            passed, detail = self._evaluate(check, target)
        except Exception as exc:  # noqa: BLE001
            logger.debug("check %r raised %s, treating as absent", check.name, exc, exc_info=True)
            passed, detail = False, None
        result = CheckResult(check=check, section=section, passed=passed, detail=detail, target=target)
        self.printer.result(result)
        return result

    def _evaluate(self, check: Check, target: Optional[str]):
        if check.kind is CheckKind.COMMAND:
            for command in check.alternatives:
                path = self.environment.which(command)
                if path is not None:
                    return True, path
                logger.debug("%s not found on search path", command)
            return False, None
        if check.kind is CheckKind.FILE:
            return Path(target).is_file(), target
        if check.kind is CheckKind.DIRECTORY:
            return Path(target).is_dir(), target
        if check.kind is CheckKind.PREDICATE:
            return check.target(self.environment)
        raise ValueError(f"unknown check kind: {check.kind}")


def run_checks(environment: Optional[Environment] = None, catalog: Sequence[Section] = CATALOG) -> Report:
    """Run the catalog without printing and return the finalized report."""
    checker = HealthChecker(catalog=catalog, environment=environment)
    checker.run()
    return checker.report
