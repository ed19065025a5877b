"""LLM provider module for commitgen.

This module provides a unified interface to the supported backends. The
backend is selected by the provider name in a ProviderConfig; adding a
backend means adding a provider class and a branch in get_provider().
"""

from pathlib import Path
from typing import Optional

from commitgen.config import LLMProvider, ProviderConfig
from commitgen.llm.base import BaseLLMProvider, LocalProvider, RemoteHostedProvider
from commitgen.llm.exceptions import (
    EmptyResponseError,
    InvalidAPIKeyError,
    LLMError,
    MissingAPIKeyError,
    NetworkError,
    ProviderConfigError,
    ProviderResponseError,
    ProviderTimeoutError,
    RateLimitError,
    ResponseParseError,
    ServiceUnavailableError,
    UnknownProviderError,
)
from commitgen.llm.parsing import sanitize_message


def get_provider(
    config: ProviderConfig,
    conventions_file: Optional[Path] = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        config: The provider configuration.
        conventions_file: Explicit conventions file for the system instruction.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        UnknownProviderError: If the provider is not supported.
        ProviderConfigError: If the configuration is invalid for the provider.
    """
    try:
        provider = LLMProvider(config.provider)
    except ValueError:
        raise UnknownProviderError(
            f"Unknown provider: {config.provider}",
            provider=config.provider,
            help="Valid providers: " + ", ".join(p.value for p in LLMProvider),
        )

    if provider == LLMProvider.OPENAI:
        from commitgen.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(config, conventions_file=conventions_file)

    elif provider == LLMProvider.OPENROUTER:
        from commitgen.llm.openrouter_provider import OpenRouterProvider

        return OpenRouterProvider(config, conventions_file=conventions_file)

    elif provider == LLMProvider.ANTHROPIC:
        from commitgen.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(config, conventions_file=conventions_file)

    else:
        from commitgen.llm.ollama_provider import OllamaProvider

        return OllamaProvider(config, conventions_file=conventions_file)


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LocalProvider",
    "RemoteHostedProvider",
    "get_provider",
    "sanitize_message",
    "LLMError",
    "ProviderConfigError",
    "UnknownProviderError",
    "MissingAPIKeyError",
    "InvalidAPIKeyError",
    "NetworkError",
    "ProviderTimeoutError",
    "ProviderResponseError",
    "RateLimitError",
    "ServiceUnavailableError",
    "ResponseParseError",
    "EmptyResponseError",
]
