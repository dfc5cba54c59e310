"""Shared pytest fixtures: a workspace with instructions and a scripted model."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import pytest

from vibechecks.checker.orchestrator import VibeChecker
from vibechecks.config import VibeChecksConfig

PASSING_RESPONSE: str = '{"passed": true, "errors": [], "warnings": []}'


class FakeOracle:
    """Records every call and answers with a fixed response or error."""

    def __init__(
        self,
        response: str = PASSING_RESPONSE,
        error: Exception | None = None,
        responses: dict[str, str] | None = None,
    ) -> None:
        self.response = response
        self.error = error
        self.responses = responses or {}
        self.calls: list[dict[str, str]] = []

    async def invoke(
        self,
        instructions: str,
        source: str,
        model_id: str,
        file_path: str,
        language_id: str,
    ) -> str:
        self.calls.append(
            {
                "instructions": instructions,
                "source": source,
                "model_id": model_id,
                "file_path": file_path,
                "language_id": language_id,
            }
        )
        if self.error is not None:
            raise self.error
        return self.responses.get(file_path, self.response)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """Return a workspace root holding one instruction document."""
    root = tmp_path / "workspace"
    instructions = root / ".vibe-checks"
    instructions.mkdir(parents=True)
    (instructions / "rules.md").write_text("Do not use tabs.\n", encoding="utf-8")
    return root


@pytest.fixture()
def oracle() -> FakeOracle:
    return FakeOracle()


@pytest.fixture()
def emitted() -> list[str]:
    return []


@pytest.fixture()
def make_checker(
    workspace: Path,
    oracle: FakeOracle,
    emitted: list[str],
) -> Callable[..., VibeChecker]:
    """Return a factory building checkers with config overrides."""

    def _make(**overrides: Any) -> VibeChecker:
        config = replace(VibeChecksConfig(model_id="test-model"), **overrides)
        return VibeChecker(config=config, root=workspace, oracle=oracle, emit=emitted.append)

    return _make
