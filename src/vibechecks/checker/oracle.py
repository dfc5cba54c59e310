"""Language model transport.

The orchestrator only depends on the ``Oracle`` protocol; ``OllamaOracle``
is the bundled implementation talking to an Ollama server over HTTP.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import httpx

from vibechecks.checker.prompt import build_prompt, source_with_line_numbers
from vibechecks.constants.config import DEFAULT_OLLAMA_URL, DEFAULT_REQUEST_TIMEOUT
from vibechecks.constants.oracle import (
    DEBUG_PROMPT_FILENAME,
    DEBUG_RESPONSE_FILENAME,
    DEFAULT_MAX_INPUT_CHARS,
    OLLAMA_GENERATE_ENDPOINT,
    OLLAMA_SHOW_ENDPOINT,
    OLLAMA_TAGS_ENDPOINT,
    REQUEST_FAILED_PREFIX,
)
from vibechecks.exceptions import ModelNotFoundError, OracleError, PromptTooLargeError

logger = logging.getLogger(__name__)

_DIFF_HEADER = "diff --git"


class Oracle(Protocol):
    """Opaque asynchronous model call returning the raw response text."""

    async def invoke(
        self,
        instructions: str,
        source: str,
        model_id: str,
        file_path: str,
        language_id: str,
    ) -> str: ...


class OllamaOracle:
    """Oracle backed by the Ollama HTTP API.

    Example:
        oracle = OllamaOracle("http://localhost:11434")
        raw = await oracle.invoke(rules, text, "llama3.1:8b", "src/app.py", "python")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_OLLAMA_URL,
        *,
        timeout: int = DEFAULT_REQUEST_TIMEOUT,
        debug_dir: Path | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the oracle.

        Args:
            base_url: Ollama server URL
            timeout: Request timeout (seconds)
            debug_dir: When set, prompt and response are dumped there as JSON
            client: Preconfigured client (tests inject a mock transport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.debug_dir = debug_dir
        self._client = client
        self._budgets: dict[str, int] = {}

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def list_models(self) -> tuple[str, ...]:
        """Return the model ids the server offers."""
        client = await self._get_client()
        try:
            response = await client.get(OLLAMA_TAGS_ENDPOINT)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise OracleError(f"{REQUEST_FAILED_PREFIX}{exc}") from exc
        models = data.get("models", []) if isinstance(data, dict) else []
        return tuple(sorted(str(m.get("name", "")) for m in models if isinstance(m, dict) and m.get("name")))

    async def input_budget(self, model_id: str) -> int:
        """Return the model's declared context length, cached per model."""
        if model_id in self._budgets:
            return self._budgets[model_id]

        client = await self._get_client()
        budget = DEFAULT_MAX_INPUT_CHARS
        try:
            response = await client.post(OLLAMA_SHOW_ENDPOINT, json={"name": model_id})
            response.raise_for_status()
            budget = _context_length(response.json()) or DEFAULT_MAX_INPUT_CHARS
        except (httpx.HTTPError, ValueError) as exc:
            logger.debug("Could not read context length for %s: %s", model_id, exc)
        self._budgets[model_id] = budget
        return budget

    async def invoke(
        self,
        instructions: str,
        source: str,
        model_id: str,
        file_path: str,
        language_id: str,
    ) -> str:
        """Send one review prompt and return the raw model text."""
        available = await self.list_models()
        if model_id not in available:
            raise ModelNotFoundError(model_id, available)

        if not source.startswith(_DIFF_HEADER):
            source = source_with_line_numbers(source)
        prompt = build_prompt(instructions, source, file_path, language_id)
        self._dump_debug(DEBUG_PROMPT_FILENAME, {"prompt": prompt})

        budget = await self.input_budget(model_id)
        if len(prompt) > budget:
            raise PromptTooLargeError(len(prompt), budget)

        client = await self._get_client()
        logger.info("Requesting review of %s from %s", file_path, model_id)
        try:
            response = await client.post(
                OLLAMA_GENERATE_ENDPOINT,
                json={
                    "model": model_id,
                    "prompt": prompt,
                    "stream": False,
                },
            )
            response.raise_for_status()
            envelope = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise OracleError(f"{REQUEST_FAILED_PREFIX}{exc}") from exc

        text = envelope.get("response", "") if isinstance(envelope, dict) else ""
        self._dump_debug(DEBUG_RESPONSE_FILENAME, {"response": text})
        return str(text)

    def _dump_debug(self, filename: str, payload: dict[str, Any]) -> None:
        if self.debug_dir is None:
            return
        try:
            (self.debug_dir / filename).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.debug("Skipping debug dump %s: %s", filename, exc)


def _context_length(data: object) -> int:
    """Extract ``*.context_length`` from an ``/api/show`` payload."""
    if not isinstance(data, dict):
        return 0
    model_info = data.get("model_info")
    if not isinstance(model_info, dict):
        return 0
    for key, value in model_info.items():
        if "context" in key.lower():
            try:
                return int(value)
            except (TypeError, ValueError):
                continue
    return 0
