"""Tests for terminal rendering of verdicts and batch summaries."""

from __future__ import annotations

from vibechecks.model import BatchSummary, CheckResult, LintMessage
from vibechecks.reporting.stdout import StdoutReporter, format_lint_entry


def test_format_lint_entry_with_and_without_line() -> None:
    assert format_lint_entry(LintMessage(line=3, message="no tabs"), 0, "a.ts") == "1. a.ts:3 no tabs"
    assert format_lint_entry(LintMessage(line=None, message="style"), 1, "a.ts") == "2. a.ts style"
    assert format_lint_entry("free text", 2, "a.ts") == "3. a.ts: free text"


def test_render_check_lists_errors_and_warnings() -> None:
    reporter = StdoutReporter(color=False)
    result = CheckResult(passed=False, errors=(LintMessage(line=1, message="e"),), warnings=("w",))

    rendered = reporter.render_check(result, "a.ts")

    assert rendered.splitlines() == ["FAIL", "", "Errors:", "1. a.ts:1 e", "", "Warnings:", "1. a.ts: w"]


def test_render_check_colors_when_enabled() -> None:
    rendered = StdoutReporter(color=True).render_check(CheckResult(), "a.ts")

    assert "\033[" in rendered
    assert "PASS" in rendered


def test_render_notification_variants() -> None:
    reporter = StdoutReporter(color=False)

    assert reporter.render_notification(CheckResult.failure("x"), "a.ts") == "Vibe check failed with 1 errors in a.ts"
    assert (
        reporter.render_notification(CheckResult(warnings=("w", "v")), "a.ts")
        == "Vibe check passed with 2 warnings in a.ts"
    )
    assert reporter.render_notification(CheckResult(), "a.ts") == "Vibe check passed successfully!"


def test_render_summary_by_status() -> None:
    reporter = StdoutReporter(color=False)

    failed = reporter.render_summary(BatchSummary(checked_files=2, failed_files=("a.ts",), total_errors=1))
    warned = reporter.render_summary(BatchSummary(checked_files=1, total_warnings=3))
    passed = reporter.render_summary(BatchSummary(checked_files=1, skipped_files=("gone.ts",)))

    assert "FAIL 1 file(s) failed: a.ts" in failed
    assert "PASS all files passed, 3 warning(s) found" in warned
    assert "PASS all changed files passed" in passed
    assert "Skipped     gone.ts" in passed
