"""OpenAI GPT provider implementation."""

import logging

import openai
from openai import OpenAI

from commitgen.config import API_KEY_ENV_VARS, MAX_TOKENS, TEMPERATURE, LLMProvider
from commitgen.llm.base import RemoteHostedProvider, translate_sdk_error
from commitgen.llm.exceptions import EmptyResponseError, LLMError
from commitgen.llm.prompts import build_user_prompt

logger = logging.getLogger(__name__)


class OpenAIProvider(RemoteHostedProvider):
    """OpenAI chat completions provider."""

    name = LLMProvider.OPENAI.value
    timeout = 30.0
    api_key_prefix = "sk-"
    api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]

    def create_client(self) -> OpenAI:
        # One attempt per invocation; retrying is the caller's decision
        return OpenAI(
            api_key=self.api_key,
            base_url=self.base_url or None,
            timeout=self.timeout,
            max_retries=0,
        )

    def extra_headers(self) -> dict:
        return {}

    def complete(self, system_prompt: str, files: list[str], patch: str) -> str:
        """Generate a commit message using the chat completions endpoint.

        Raises:
            NetworkError: If the API cannot be reached or times out.
            ProviderResponseError: On a non-success status.
            EmptyResponseError: If the reply has no choices or no content.
        """
        client = self.create_client()
        user_prompt = build_user_prompt(files, patch)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                extra_headers=self.extra_headers() or None,
            )
        except openai.OpenAIError as e:
            raise translate_sdk_error(e, self.name, openai) from e

        if not response.choices:
            raise EmptyResponseError(f"No response from {self.name}", provider=self.name)

        content = response.choices[0].message.content
        if content is None:
            raise EmptyResponseError(f"{self.name} returned an empty message", provider=self.name)
        if not isinstance(content, str):
            raise LLMError(f"Unexpected {self.name} response content: {content!r}", provider=self.name)
        return content
