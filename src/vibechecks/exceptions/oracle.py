"""Language model invocation exceptions."""

from __future__ import annotations

from vibechecks.exceptions.base import VibeChecksError


class OracleError(VibeChecksError, RuntimeError):
    """Raised when the language model call fails."""


class ModelNotFoundError(OracleError):
    """Raised when the configured model id is not offered by the transport."""

    def __init__(self, model_id: str, available: tuple[str, ...]) -> None:
        self.model_id = model_id
        self.available = available
        super().__init__(f"Model '{model_id}' not found. Available models: {', '.join(available)}")


class PromptTooLargeError(OracleError):
    """Raised instead of silently truncating a prompt over the model's input budget."""

    def __init__(self, length: int, budget: int) -> None:
        self.length = length
        self.budget = budget
        super().__init__(
            f"Prompt exceeds model's max input tokens ({budget}). Check smaller files or choose another model."
        )
