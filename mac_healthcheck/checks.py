"""Check definitions, per-check results and the accumulated report."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from .environment import Environment

Predicate = Callable[[Environment], Tuple[bool, Optional[str]]]

PASS_GLYPH = "✓"
WARN_GLYPH = "⚠"
FAIL_GLYPH = "✗"


class CheckKind(str, Enum):
    COMMAND = "command"
    FILE = "file"
    DIRECTORY = "directory"
    PREDICATE = "predicate"


@dataclass(frozen=True)
class Check:
    name: str
    kind: CheckKind
    target: Union[str, Tuple[str, ...], Predicate]
    required: bool = True
    ok_text: Optional[str] = None
    fail_text: Optional[str] = None
    warning: Optional[str] = None

    @property
    def alternatives(self) -> Tuple[str, ...]:
        if isinstance(self.target, tuple):
            return self.target
        return (str(self.target),)


@dataclass(frozen=True)
class Section:
    title: str
    checks: Tuple[Check, ...]


@dataclass
class CheckResult:
    check: Check
    section: str
    passed: bool
    detail: Optional[str] = None
    target: Optional[str] = None

    @property
    def status(self) -> str:
        if self.passed:
            return "pass"
        return "fail" if self.check.required else "warn"

    @property
    def glyph(self) -> str:
        return {"pass": PASS_GLYPH, "warn": WARN_GLYPH, "fail": FAIL_GLYPH}[self.status]

    @property
    def label(self) -> str:
        template = self.check.ok_text if self.passed else self.check.fail_text
        return self._render(template or "{name}")

    @property
    def warning_text(self) -> Optional[str]:
        if self.passed or self.check.required:
            return None
        return self._render(self.check.warning or "{name} not found")

    def _render(self, template: str) -> str:
        return template.format(name=self.check.name, detail=self.detail or "", target=self.target or "")


class ReportFinalizedError(RuntimeError):
    """Raised when a result is added to a report that has already been summarized."""


@dataclass
class Report:
    results: List[CheckResult] = field(default_factory=list)
    finalized: bool = False

    def add(self, result: CheckResult) -> None:
        if self.finalized:
            raise ReportFinalizedError(f"cannot add {result.check.name!r} to a finalized report")
        self.results.append(result)

    def finalize(self) -> "Report":
        self.finalized = True
        return self

    @property
    def missing_tools(self) -> List[str]:
        return [r.check.name for r in self.results if not r.passed and r.check.required]

    @property
    def warnings(self) -> List[str]:
        return [r.warning_text for r in self.results if r.warning_text is not None]

    @property
    def exit_code(self) -> int:
        return 1 if self.missing_tools else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [
                {
                    "section": r.section,
                    "name": r.check.name,
                    "kind": r.check.kind.value,
                    "required": r.check.required,
                    "status": r.status,
                    "detail": r.detail,
                }
                for r in self.results
            ],
            "missing_tools": self.missing_tools,
            "warnings": self.warnings,
            "exit_code": self.exit_code,
        }


def catalog_size(sections: Sequence[Section]) -> int:
    return sum(len(section.checks) for section in sections)
