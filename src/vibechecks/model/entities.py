"""Dataclasses shared by the checker, renderer, and reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from vibechecks.constants.reporting import BATCH_STATUS_FAILED, BATCH_STATUS_PASSED, BATCH_STATUS_WARNINGS
from vibechecks.types import BatchStatus, JsonObject, JsonValue, Severity


@dataclass(frozen=True)
class LintMessage:
    """A structured lint entry; ``line`` is 1-based, ``None`` when unknown."""

    line: int | None
    message: str

    def to_dict(self) -> JsonObject:
        return {"line": self.line, "message": self.message}


LintEntry: TypeAlias = str | LintMessage


def _entry_to_json(entry: LintEntry) -> JsonValue:
    if isinstance(entry, LintMessage):
        return entry.to_dict()
    return entry


@dataclass(frozen=True)
class CheckResult:
    """Normalized verdict for one checked document."""

    passed: bool = True
    errors: tuple[LintEntry, ...] = ()
    warnings: tuple[LintEntry, ...] = ()

    @classmethod
    def failure(cls, message: str) -> CheckResult:
        """Build a failing verdict whose only error is ``message``."""
        return cls(passed=False, errors=(message,), warnings=())

    def to_dict(self) -> JsonObject:
        return {
            "passed": self.passed,
            "errors": [_entry_to_json(entry) for entry in self.errors],
            "warnings": [_entry_to_json(entry) for entry in self.warnings],
        }


@dataclass(frozen=True)
class Document:
    """An editor-style document: identity, text, and language id."""

    path: Path
    text: str
    language_id: str


@dataclass(frozen=True)
class Diagnostic:
    """A rendered, 0-based diagnostic for one lint entry."""

    line: int
    start_column: int
    end_column: int
    message: str
    severity: Severity


@dataclass(frozen=True)
class GitStatusFile:
    """One ``git status --porcelain`` entry."""

    status: str
    filename: str


@dataclass(frozen=True)
class BatchSummary:
    """Aggregated outcome of checking a set of files."""

    checked_files: int = 0
    failed_files: tuple[str, ...] = ()
    skipped_files: tuple[str, ...] = ()
    total_errors: int = 0
    total_warnings: int = 0
    results: dict[str, CheckResult] = field(default_factory=dict)

    @property
    def status(self) -> BatchStatus:
        """Classify the batch: any failing file, else any warning, else clean."""
        if self.failed_files:
            return BATCH_STATUS_FAILED  # type: ignore[return-value]
        if self.total_warnings > 0:
            return BATCH_STATUS_WARNINGS  # type: ignore[return-value]
        return BATCH_STATUS_PASSED  # type: ignore[return-value]

    def to_dict(self) -> JsonObject:
        return {
            "status": self.status,
            "checked_files": self.checked_files,
            "failed_files": list(self.failed_files),
            "skipped_files": list(self.skipped_files),
            "total_errors": self.total_errors,
            "total_warnings": self.total_warnings,
        }
