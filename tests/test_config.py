"""Tests for configuration loading and path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from vibechecks.config import VibeChecksConfig, load_config, resolve_workspace_path
from vibechecks.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == VibeChecksConfig()
    assert loaded.model_id == ""
    assert loaded.debounce_seconds == 1.5
    assert loaded.changed_lines_only is False


def test_load_config_reads_values(tmp_path: Path) -> None:
    (tmp_path / "vibechecks.yaml").write_text(
        "model_id: ' llama3.1:8b '\n"
        "scope: changed_lines\n"
        "run_on: on_change\n"
        "debounce_seconds: 2\n"
        "ollama_url: http://gpu-box:11434/\n"
        "language_sections: false\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.model_id == "llama3.1:8b"
    assert loaded.changed_lines_only is True
    assert loaded.run_on == "on_change"
    assert loaded.debounce_seconds == 2.0
    assert loaded.ollama_url == "http://gpu-box:11434"
    assert loaded.language_sections is False


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "vibechecks.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == VibeChecksConfig()


def test_explicit_missing_config_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("scope: everything\n", "scope"),
        ("run_on: on_commit\n", "run_on"),
        ("debounce_seconds: true\n", "debounce_seconds"),
        ("debounce_seconds: 0\n", "debounce_seconds"),
        ("request_timeout: 1.5\n", "request_timeout"),
        ("in_editor_feedback: maybe\n", "in_editor_feedback"),
        ("model_id: 12\n", "model_id"),
        ("- a list\n", "mapping"),
        ("model_id: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "invalid_scope",
        "invalid_run_on",
        "bool_debounce",
        "zero_debounce",
        "float_timeout",
        "non_bool_feedback",
        "non_string_model",
        "not_a_mapping",
        "broken_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "vibechecks.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)


def test_unknown_key_suggests_closest_match(tmp_path: Path) -> None:
    (tmp_path / "vibechecks.yaml").write_text("modelid: x\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="did you mean 'model_id'"):
        load_config(tmp_path)


def test_workspace_token_expands_against_root(tmp_path: Path) -> None:
    assert resolve_workspace_path("${workspaceFolder}/rules", tmp_path) == tmp_path / "rules"
    assert resolve_workspace_path("rules", tmp_path) == tmp_path / "rules"
    assert resolve_workspace_path("/abs/rules", tmp_path) == Path("/abs/rules")


def test_workspace_paths_require_a_root() -> None:
    with pytest.raises(ConfigError, match="No workspace folder opened"):
        VibeChecksConfig().instructions_path(None)


def test_cache_file_defaults_under_workspace(tmp_path: Path) -> None:
    config = VibeChecksConfig()

    assert config.cache_file(tmp_path) == tmp_path / ".vibe-checks-cache" / "vibe-checks-cache.json"
    assert VibeChecksConfig(cache_path="tmp/c.json").cache_file(tmp_path) == tmp_path / "tmp" / "c.json"
