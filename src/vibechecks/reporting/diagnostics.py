"""Map verdict entries to 0-based, editor-renderable diagnostics."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from vibechecks.constants.reporting import (
    DIAGNOSTIC_END_COLUMN,
    DIAGNOSTIC_START_COLUMN,
    LEGACY_LINE_PATTERN,
    SEVERITY_ERROR,
    SEVERITY_WARNING,
)
from vibechecks.model import CheckResult, Diagnostic, LintEntry, LintMessage
from vibechecks.types import Severity


def entry_line(entry: LintEntry) -> int:
    """Return the 0-based line for an entry; line 0 when no position is known.

    Free-text entries are scanned for a ``line N`` mention.
    """
    if isinstance(entry, LintMessage):
        reported = entry.line
    else:
        match = LEGACY_LINE_PATTERN.search(entry)
        reported = int(match.group(1)) if match else None
    if reported is None:
        return 0
    return max(0, reported - 1)


def entry_message(entry: LintEntry) -> str:
    return entry.message if isinstance(entry, LintMessage) else entry


def build_diagnostics(result: CheckResult) -> list[Diagnostic]:
    """Render one diagnostic per entry: errors first, then warnings."""
    return [
        *_diagnostics_for(result.errors, SEVERITY_ERROR),  # type: ignore[arg-type]
        *_diagnostics_for(result.warnings, SEVERITY_WARNING),  # type: ignore[arg-type]
    ]


def _diagnostics_for(entries: tuple[LintEntry, ...], severity: Severity) -> Iterator[Diagnostic]:
    for entry in entries:
        line = entry_line(entry)
        yield Diagnostic(
            line=line,
            start_column=DIAGNOSTIC_START_COLUMN,
            end_column=DIAGNOSTIC_END_COLUMN,
            message=entry_message(entry),
            severity=severity,
        )


class DiagnosticCollection:
    """Latest diagnostics per document, replaced wholesale on every check."""

    def __init__(self) -> None:
        self._by_document: dict[Path, list[Diagnostic]] = {}

    def show(self, result: CheckResult, path: Path) -> list[Diagnostic]:
        diagnostics = build_diagnostics(result)
        self._by_document[path] = diagnostics
        return diagnostics

    def get(self, path: Path) -> list[Diagnostic]:
        return list(self._by_document.get(path, []))

    def clear(self, path: Path) -> None:
        self._by_document[path] = []

    def clear_all(self) -> None:
        self._by_document.clear()

    def items(self) -> list[tuple[Path, list[Diagnostic]]]:
        return sorted(self._by_document.items(), key=lambda item: item[0].as_posix())
