"""OpenRouter provider implementation.

OpenRouter provides unified access to many models through an
OpenAI-compatible API, so it reuses the OpenAI provider with its own
endpoint, key format and attribution headers.
"""

from commitgen.config import API_KEY_ENV_VARS, LLMProvider
from commitgen.llm.openai_provider import OpenAIProvider

# OpenRouter API base URL
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter LLM provider (OpenAI-compatible)."""

    name = LLMProvider.OPENROUTER.value
    timeout = 30.0
    api_key_prefix = "sk-or-"
    api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENROUTER]

    def validate_config(self) -> None:
        super().validate_config()
        self.base_url = self.base_url or OPENROUTER_BASE_URL

    def extra_headers(self) -> dict:
        return {
            "HTTP-Referer": "https://github.com/commitgen",
            "X-Title": "commitgen",
        }
