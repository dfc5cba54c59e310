"""Human-readable check log for terminal output."""

from __future__ import annotations

from vibechecks.constants.branding import ASCII_LOGO_LINES, BATCH_SUMMARY_TITLE
from vibechecks.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    BATCH_STATUS_FAILED,
    BATCH_STATUS_WARNINGS,
)
from vibechecks.model import BatchSummary, CheckResult, LintEntry, LintMessage


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def format_lint_entry(entry: LintEntry, index: int, rel_path: str) -> str:
    """Render ``N. path[:line] message`` with a 1-based list index."""
    if isinstance(entry, LintMessage):
        location = f":{entry.line}" if entry.line is not None else ""
        return f"{index + 1}. {rel_path}{location} {entry.message}"
    return f"{index + 1}. {rel_path}: {entry}"


class StdoutReporter:
    """Formats per-file verdicts and batch summaries as plain text."""

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _paint(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color else text

    def render_start(self, rel_path: str) -> str:
        return f"\n>_ Vibe checking {rel_path}"

    def render_check(self, result: CheckResult, rel_path: str) -> str:
        """Render the verdict line followed by numbered errors and warnings."""
        lines = [self._paint("PASS", ANSI_GREEN) if result.passed else self._paint("FAIL", ANSI_RED)]

        if result.errors:
            lines.append("")
            lines.append(self._paint("Errors:", ANSI_RED))
            lines.extend(format_lint_entry(entry, index, rel_path) for index, entry in enumerate(result.errors))

        if result.warnings:
            lines.append("")
            lines.append(self._paint("Warnings:", ANSI_YELLOW))
            lines.extend(format_lint_entry(entry, index, rel_path) for index, entry in enumerate(result.warnings))

        return "\n".join(lines)

    def render_notification(self, result: CheckResult, rel_path: str) -> str:
        """One-line status, the terminal stand-in for an editor notification."""
        if not result.passed:
            return f"Vibe check failed with {len(result.errors)} errors in {rel_path}"
        if result.warnings:
            return f"Vibe check passed with {len(result.warnings)} warnings in {rel_path}"
        return "Vibe check passed successfully!"

    def render_summary(self, summary: BatchSummary) -> str:
        """Render the batch classification block."""
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {self._paint(BATCH_SUMMARY_TITLE, ANSI_BOLD)}",
            sep,
            f"  Files       {summary.checked_files} checked / {len(summary.failed_files)} failed",
            f"  Findings    {summary.total_errors} errors / {summary.total_warnings} warnings",
        ]
        if summary.skipped_files:
            skipped = ", ".join(summary.skipped_files)
            lines.append(self._paint(f"  Skipped     {skipped}", ANSI_DIM))
        lines.append("")

        if summary.status == BATCH_STATUS_FAILED:
            failed = ", ".join(summary.failed_files)
            lines.append(self._paint(f"  FAIL {len(summary.failed_files)} file(s) failed: {failed}", ANSI_RED))
        elif summary.status == BATCH_STATUS_WARNINGS:
            lines.append(
                self._paint(f"  PASS all files passed, {summary.total_warnings} warning(s) found", ANSI_YELLOW)
            )
        else:
            lines.append(self._paint("  PASS all changed files passed", ANSI_GREEN))
        return "\n".join(lines)
