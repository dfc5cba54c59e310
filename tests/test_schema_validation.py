"""Tests for JSON Schema validation of persisted and reported payloads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from vibechecks.checker.cache import FingerprintCache
from vibechecks.checker.normalizer import parse_response
from vibechecks.io import text_sha256
from vibechecks.model import BatchSummary, CheckResult

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[1] / "schemas"


def _load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))


@pytest.mark.parametrize("name", ["cache.schema.json", "result.schema.json", "summary.schema.json"])
def test_schema_is_valid_json_schema(name: str) -> None:
    jsonschema.Draft202012Validator.check_schema(_load_schema(name))


def test_persisted_cache_validates(tmp_path: Path) -> None:
    cache_path = tmp_path / "cache.json"
    cache = FingerprintCache(cache_path)
    cache.set(
        "src/a.ts",
        {"instructionsHash": text_sha256("rules"), "fileHash": text_sha256("x"), "response": "{}"},
    )

    payload = json.loads(cache_path.read_text(encoding="utf-8"))

    jsonschema.validate(instance=payload, schema=_load_schema("cache.schema.json"))


@pytest.mark.parametrize(
    "raw",
    [
        '{"passed": false, "errors": [{"line": 3, "message": "no tabs"}, "legacy"], "warnings": []}',
        "no json at all",
        '{"passed": true, "warnings": [{"line": null, "message": "hmm"}, 7]}',
    ],
)
def test_normalized_result_validates(raw: str) -> None:
    jsonschema.validate(instance=parse_response(raw).to_dict(), schema=_load_schema("result.schema.json"))


def test_summary_payload_validates() -> None:
    summary = BatchSummary(
        checked_files=2,
        failed_files=("a.ts",),
        total_errors=1,
        results={"a.ts": CheckResult.failure("bad"), "b.ts": CheckResult()},
    )

    payload = summary.to_dict()

    jsonschema.validate(instance=payload, schema=_load_schema("summary.schema.json"))
    assert payload["status"] == "failed"
