"""Constants for locating and splitting instruction documents."""

from __future__ import annotations

import re

INSTRUCTION_FILE_SUFFIX: str = ".md"

# Capturing split keeps the heading lines in the output of ``re.split``.
SECTION_SPLIT_PATTERN: re.Pattern[str] = re.compile(r"(^## .*$)", re.MULTILINE)
SECTION_HEADING_PATTERN: re.Pattern[str] = re.compile(r"^##\s+", re.MULTILINE)

MISSING_INSTRUCTIONS_MESSAGE: str = "Add instructions to your .vibe-checks folder."
