"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "VIBECHECKS"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ VIBECHECKS",
    "     // natural-language linting",
)
BATCH_SUMMARY_TITLE: str = "It's giving..."
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} instruction-driven linter"))
WATCH_DESCRIPTION: str = (
    "Poll files and re-check them when they are written. With run_on: on_change writes are "
    "debounced per file; on_open also checks every file once at start; on_save and on_command "
    "check on every detected write."
)
