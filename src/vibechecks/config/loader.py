"""Config loading and validation for vibechecks."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from vibechecks.config.model import VibeChecksConfig
from vibechecks.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_INSTRUCTIONS_FOLDER,
    DEFAULT_OLLAMA_URL,
    DEFAULT_REQUEST_TIMEOUT,
    RUN_ON_COMMAND,
    SCOPE_WHOLE_FILE,
    VALID_RUN_ON,
    VALID_SCOPES,
)
from vibechecks.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> VibeChecksConfig:
    """Load and validate checker config from ``vibechecks.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return VibeChecksConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown_keys = sorted(str(key) for key in set(raw) - CONFIG_ALLOWED_KEYS)
    if unknown_keys:
        hint = _suggest_key(unknown_keys[0])
        suffix = f" (did you mean '{hint}'?)" if hint else ""
        raise ConfigError(f"Unknown config key '{unknown_keys[0]}'{suffix}")

    scope = raw.get("scope", SCOPE_WHOLE_FILE)
    if scope not in VALID_SCOPES:
        raise ConfigError(f"scope must be one of {sorted(VALID_SCOPES)}, got {scope!r}")

    run_on = raw.get("run_on", RUN_ON_COMMAND)
    if run_on not in VALID_RUN_ON:
        raise ConfigError(f"run_on must be one of {sorted(VALID_RUN_ON)}, got {run_on!r}")

    debounce_seconds = raw.get("debounce_seconds", DEFAULT_DEBOUNCE_SECONDS)
    if isinstance(debounce_seconds, bool) or not isinstance(debounce_seconds, (int, float)) or debounce_seconds <= 0:
        raise ConfigError("debounce_seconds must be a positive number")

    request_timeout = raw.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)
    if isinstance(request_timeout, bool) or not isinstance(request_timeout, int) or request_timeout <= 0:
        raise ConfigError("request_timeout must be a positive integer")

    cache_path = raw.get("cache_path")
    if cache_path is not None:
        cache_path = _ensure_string(cache_path, "cache_path")

    return VibeChecksConfig(
        model_id=_ensure_string(raw.get("model_id", ""), "model_id").strip(),
        instructions_folder=_ensure_string(
            raw.get("instructions_folder", DEFAULT_INSTRUCTIONS_FOLDER), "instructions_folder"
        ),
        in_editor_feedback=_ensure_bool(raw.get("in_editor_feedback", True), "in_editor_feedback"),
        scope=scope,
        debug_prompt=_ensure_bool(raw.get("debug_prompt", False), "debug_prompt"),
        language_sections=_ensure_bool(raw.get("language_sections", True), "language_sections"),
        run_on=run_on,
        debounce_seconds=float(debounce_seconds),
        cache_path=cache_path,
        ollama_url=_ensure_string(raw.get("ollama_url", DEFAULT_OLLAMA_URL), "ollama_url").rstrip("/"),
        request_timeout=request_timeout,
    )


def _ensure_string(value: Any, key_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _suggest_key(key: str) -> str | None:
    """Return the closest allowed key for a typo, if any is close enough."""
    matches = difflib.get_close_matches(key, sorted(CONFIG_ALLOWED_KEYS), n=1, cutoff=0.6)
    return matches[0] if matches else None
