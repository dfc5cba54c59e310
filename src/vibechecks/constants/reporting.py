"""Constants for diagnostics, SARIF export, and stdout formatting."""

from __future__ import annotations

import re

DIAGNOSTIC_START_COLUMN: int = 0
DIAGNOSTIC_END_COLUMN: int = 100
LEGACY_LINE_PATTERN: re.Pattern[str] = re.compile(r"line\s*(\d+)", re.IGNORECASE)

SEVERITY_ERROR: str = "error"
SEVERITY_WARNING: str = "warning"

BATCH_STATUS_PASSED: str = "passed"
BATCH_STATUS_WARNINGS: str = "warnings"
BATCH_STATUS_FAILED: str = "failed"

SARIF_VERSION: str = "2.1.0"
SARIF_SCHEMA_URI: str = "https://docs.oasis-open.org/sarif/sarif/v2.1.0/cos02/schemas/sarif-schema-2.1.0.json"
SARIF_TOOL_NAME: str = "vibechecks"
SARIF_RULE_ID: str = "VIBE_CHECK"
SARIF_TEMP_PREFIX: str = ".sarif_tmp_"
SARIF_TEMP_SUFFIX: str = ".sarif"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"
