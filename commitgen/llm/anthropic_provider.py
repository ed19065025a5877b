"""Anthropic Claude provider implementation."""

import anthropic
from anthropic import Anthropic

from commitgen.config import API_KEY_ENV_VARS, MAX_TOKENS, TEMPERATURE, LLMProvider
from commitgen.llm.base import RemoteHostedProvider, translate_sdk_error
from commitgen.llm.exceptions import EmptyResponseError
from commitgen.llm.prompts import build_user_prompt


class AnthropicProvider(RemoteHostedProvider):
    """Anthropic Claude LLM provider."""

    name = LLMProvider.ANTHROPIC.value
    timeout = 30.0
    api_key_prefix = "sk-ant-"
    api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]

    def create_client(self) -> Anthropic:
        return Anthropic(
            api_key=self.api_key,
            base_url=self.base_url or None,
            timeout=self.timeout,
            max_retries=0,
        )

    def complete(self, system_prompt: str, files: list[str], patch: str) -> str:
        """Generate a commit message using the messages endpoint.

        Raises:
            NetworkError: If the API cannot be reached or times out.
            ProviderResponseError: On a non-success status.
            EmptyResponseError: If the reply carries no text block.
        """
        client = self.create_client()
        user_prompt = build_user_prompt(files, patch)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.AnthropicError as e:
            raise translate_sdk_error(e, self.name, anthropic) from e

        texts = [
            block.text for block in (message.content or [])
            if getattr(block, "type", None) == "text"
        ]
        if not texts:
            raise EmptyResponseError(f"No response from {self.name}", provider=self.name)
        return "".join(texts)
