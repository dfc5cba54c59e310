"""Config data model for vibechecks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vibechecks.constants.cache import CACHE_DIRNAME, CACHE_FILENAME
from vibechecks.constants.config import (
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_INSTRUCTIONS_FOLDER,
    DEFAULT_OLLAMA_URL,
    DEFAULT_REQUEST_TIMEOUT,
    SCOPE_CHANGED_LINES,
    WORKSPACE_FOLDER_TOKEN,
)
from vibechecks.exceptions import ConfigError
from vibechecks.types import RunOn, Scope


def resolve_workspace_path(config_path: str, root: Path | None) -> Path:
    """Expand ``${workspaceFolder}`` in a configured path against the workspace root."""
    if root is None:
        raise ConfigError("No workspace folder opened")
    expanded = Path(config_path.replace(WORKSPACE_FOLDER_TOKEN, str(root)))
    if not expanded.is_absolute():
        expanded = root / expanded
    return expanded


@dataclass(frozen=True)
class VibeChecksConfig:
    """Resolved checker config."""

    model_id: str = ""
    instructions_folder: str = DEFAULT_INSTRUCTIONS_FOLDER
    in_editor_feedback: bool = True
    scope: Scope = "whole_file"
    debug_prompt: bool = False
    language_sections: bool = True
    run_on: RunOn = "on_command"
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    cache_path: str | None = None
    ollama_url: str = DEFAULT_OLLAMA_URL
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT

    @property
    def changed_lines_only(self) -> bool:
        """Whether the model sees the git diff instead of the whole file."""
        return self.scope == SCOPE_CHANGED_LINES

    def instructions_path(self, root: Path | None) -> Path:
        """Absolute instructions folder for the workspace."""
        return resolve_workspace_path(self.instructions_folder, root)

    def cache_file(self, root: Path | None) -> Path:
        """Absolute cache artifact path for the workspace."""
        if self.cache_path:
            return resolve_workspace_path(self.cache_path, root)
        if root is None:
            raise ConfigError("No workspace folder opened")
        return root / CACHE_DIRNAME / CACHE_FILENAME
