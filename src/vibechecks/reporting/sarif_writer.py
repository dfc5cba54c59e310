"""SARIF 2.1.0 export of rendered diagnostics."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from vibechecks import __version__
from vibechecks.constants.reporting import (
    SARIF_RULE_ID,
    SARIF_SCHEMA_URI,
    SARIF_TEMP_PREFIX,
    SARIF_TEMP_SUFFIX,
    SARIF_TOOL_NAME,
    SARIF_VERSION,
)
from vibechecks.io import write_text_atomic
from vibechecks.model import Diagnostic


def _build_sarif_result(uri: str, diagnostic: Diagnostic) -> dict[str, Any]:
    """Map a single diagnostic to a SARIF result object."""
    return {
        "ruleId": SARIF_RULE_ID,
        "level": diagnostic.severity,
        "message": {"text": diagnostic.message},
        "locations": [
            {
                "physicalLocation": {
                    "artifactLocation": {"uri": uri},
                    "region": {
                        # SARIF lines and columns are 1-based.
                        "startLine": diagnostic.line + 1,
                        "startColumn": diagnostic.start_column + 1,
                        "endColumn": diagnostic.end_column + 1,
                    },
                },
            },
        ],
    }


def build_sarif_envelope(diagnostics_by_uri: dict[str, list[Diagnostic]]) -> dict[str, Any]:
    """Build a complete SARIF 2.1.0 document from per-file diagnostics."""
    results = [
        _build_sarif_result(uri, diagnostic)
        for uri in sorted(diagnostics_by_uri)
        for diagnostic in diagnostics_by_uri[uri]
    ]
    return {
        "$schema": SARIF_SCHEMA_URI,
        "version": SARIF_VERSION,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": SARIF_TOOL_NAME,
                        "version": __version__,
                        "rules": [
                            {
                                "id": SARIF_RULE_ID,
                                "shortDescription": {"text": "Instruction-driven review finding"},
                            }
                        ],
                    },
                },
                "results": results,
            }
        ],
    }


def write_sarif(path: Path, diagnostics_by_uri: dict[str, list[Diagnostic]]) -> Path:
    """Write the SARIF document atomically and return its path."""
    envelope = build_sarif_envelope(diagnostics_by_uri)
    write_text_atomic(
        path=path,
        content=json.dumps(envelope, indent=2) + "\n",
        temp_prefix=SARIF_TEMP_PREFIX,
        temp_suffix=SARIF_TEMP_SUFFIX,
    )
    return path
