"""Turn raw model output into a typed ``CheckResult``.

The model's JSON format is a convention, not a guarantee, so every step
degrades to a passing verdict with an informational warning instead of
raising.
"""

from __future__ import annotations

import json
import math
import re

from vibechecks.constants.oracle import (
    RESPONSE_EXCERPT_LENGTH,
    UNPARSEABLE_RESPONSE_PREFIX,
    UNSTRUCTURED_RESPONSE_PREFIX,
)
from vibechecks.model import CheckResult, LintEntry, LintMessage

# Greedy: first ``{`` through last ``}``.
_JSON_SPAN_PATTERN = re.compile(r"\{[\s\S]*\}")


def parse_response(response: str) -> CheckResult:
    """Normalize a raw model response into a verdict; never raises."""
    match = _JSON_SPAN_PATTERN.search(response)
    if match is None:
        return _degraded(UNSTRUCTURED_RESPONSE_PREFIX, response)

    try:
        parsed = json.loads(match.group(0))
    except (ValueError, RecursionError):
        return _degraded(UNPARSEABLE_RESPONSE_PREFIX, response)
    if not isinstance(parsed, dict):
        return _degraded(UNPARSEABLE_RESPONSE_PREFIX, response)

    passed = parsed.get("passed")
    try:
        errors = normalize_entries(parsed.get("errors"))
        warnings = normalize_entries(parsed.get("warnings"))
    except (RecursionError, ValueError):
        # str() of deeply nested or oversized values.
        return _degraded(UNPARSEABLE_RESPONSE_PREFIX, response)
    return CheckResult(
        passed=True if passed is None else bool(passed),
        errors=errors,
        warnings=warnings,
    )


def normalize_entries(raw: object) -> tuple[LintEntry, ...]:
    """Coerce a JSON ``errors``/``warnings`` value into lint entries."""
    if not isinstance(raw, list):
        return ()
    return tuple(_normalize_entry(item) for item in raw)


def _normalize_entry(item: object) -> LintEntry:
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and "message" in item:
        return LintMessage(line=_coerce_line(item.get("line")), message=str(item["message"]))
    return str(item)


def _coerce_line(value: object) -> int | None:
    """Accept positive whole numbers only; anything else has no known position."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        return None
    line = int(value)
    return line if line > 0 else None


def _degraded(prefix: str, response: str) -> CheckResult:
    excerpt = response[:RESPONSE_EXCERPT_LENGTH]
    return CheckResult(passed=True, errors=(), warnings=(f"{prefix}{excerpt}...",))
