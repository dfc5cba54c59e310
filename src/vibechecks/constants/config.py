"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "vibechecks.yaml"
WORKSPACE_FOLDER_TOKEN: str = "${workspaceFolder}"

DEFAULT_INSTRUCTIONS_FOLDER: str = "${workspaceFolder}/.vibe-checks"
DEFAULT_OLLAMA_URL: str = "http://localhost:11434"
DEFAULT_REQUEST_TIMEOUT: int = 120
DEFAULT_DEBOUNCE_SECONDS: float = 1.5
DEFAULT_POLL_INTERVAL_SECONDS: float = 0.5

SCOPE_WHOLE_FILE: str = "whole_file"
SCOPE_CHANGED_LINES: str = "changed_lines"
VALID_SCOPES: frozenset[str] = frozenset({SCOPE_WHOLE_FILE, SCOPE_CHANGED_LINES})

RUN_ON_COMMAND: str = "on_command"
RUN_ON_SAVE: str = "on_save"
RUN_ON_CHANGE: str = "on_change"
RUN_ON_OPEN: str = "on_open"
VALID_RUN_ON: frozenset[str] = frozenset({RUN_ON_COMMAND, RUN_ON_SAVE, RUN_ON_CHANGE, RUN_ON_OPEN})

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset(
    {
        "model_id",
        "instructions_folder",
        "in_editor_feedback",
        "scope",
        "debug_prompt",
        "language_sections",
        "run_on",
        "debounce_seconds",
        "cache_path",
        "ollama_url",
        "request_timeout",
    }
)
