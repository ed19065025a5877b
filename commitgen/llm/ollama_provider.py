"""Ollama provider implementation.

Talks to a local Ollama server through its REST API (`/api/generate`).
No credentials are needed.
"""

import logging
from typing import Any, Dict

import requests

from commitgen.config import MAX_TOKENS, TEMPERATURE, LLMProvider
from commitgen.llm.base import LocalProvider
from commitgen.llm.exceptions import (
    EmptyResponseError,
    LLMError,
    NetworkError,
    ProviderTimeoutError,
    ResponseParseError,
    error_for_status,
)
from commitgen.llm.prompts import build_completion_prompt

logger = logging.getLogger(__name__)


class OllamaProvider(LocalProvider):
    """Local Ollama model provider."""

    name = LLMProvider.OLLAMA.value
    timeout = 60.0

    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/generate"

    def complete(self, system_prompt: str, files: list[str], patch: str) -> str:
        """Generate a commit message using the generate endpoint.

        Raises:
            NetworkError: If the server cannot be reached or times out.
            ProviderResponseError: On a non-200 status.
            ResponseParseError: If the body is not the expected JSON.
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": build_completion_prompt(system_prompt, files, patch),
            "stream": False,
            "options": {
                "temperature": TEMPERATURE,
                "num_predict": MAX_TOKENS,
            },
        }
        url = self.endpoint()
        logger.debug("Sending request to %s with model %s", url, self.model)

        try:
            response = requests.post(url, json=payload, timeout=self.timeout)
        except requests.Timeout as e:
            raise ProviderTimeoutError(f"{self.name} request timed out", provider=self.name) from e
        except requests.RequestException as e:
            raise NetworkError(f"Network error: {e}", provider=self.name) from e

        if response.status_code != 200:
            raise error_for_status(response.status_code, self.name, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Failed to decode {self.name} response: {e}", provider=self.name
            ) from e

        if not isinstance(data, dict):
            raise ResponseParseError(f"Unexpected {self.name} response structure", provider=self.name)
        if data.get("error"):
            raise LLMError(f"Ollama API error: {data['error']}", provider=self.name)

        text = data.get("response")
        if not text:
            raise EmptyResponseError(f"No response from {self.name}", provider=self.name)
        return text
