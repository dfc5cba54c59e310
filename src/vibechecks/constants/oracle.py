"""Constants for model invocation and response handling."""

from __future__ import annotations

OLLAMA_TAGS_ENDPOINT: str = "/api/tags"
OLLAMA_SHOW_ENDPOINT: str = "/api/show"
OLLAMA_GENERATE_ENDPOINT: str = "/api/generate"

# Used when the model does not report a context length.
DEFAULT_MAX_INPUT_CHARS: int = 32768

RESPONSE_EXCERPT_LENGTH: int = 200
UNSTRUCTURED_RESPONSE_PREFIX: str = "AI Response: "
UNPARSEABLE_RESPONSE_PREFIX: str = "Failed to parse AI response: "
REQUEST_FAILED_PREFIX: str = "Language model request failed: "

DEBUG_PROMPT_FILENAME: str = "debug-prompt.json"
DEBUG_RESPONSE_FILENAME: str = "debug-response.json"

MISSING_MODEL_MESSAGE: str = "No language model configured. Please set model_id in vibechecks.yaml or pass --model."
