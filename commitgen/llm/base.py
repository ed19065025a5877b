"""Base classes and shared utilities for LLM providers.

Backends come in two variants:
- RemoteHostedProvider: a hosted API that needs an API key
- LocalProvider: a model server reachable over HTTP without credentials

Both validate their configuration on construction, issue exactly one
request per generate() call and run the reply through sanitize_message().
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from commitgen.config import ProviderConfig
from commitgen.llm.exceptions import (
    InvalidAPIKeyError,
    LLMError,
    MissingAPIKeyError,
    NetworkError,
    ProviderConfigError,
    ProviderTimeoutError,
    ResponseParseError,
    error_for_status,
)
from commitgen.llm.parsing import sanitize_message
from commitgen.llm.prompts import load_conventions

logger = logging.getLogger(__name__)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    #: Backend name, also used as the cache provider tag
    name: str = ""

    #: Request timeout in seconds
    timeout: float = 30.0

    def __init__(self, config: ProviderConfig, conventions_file: Optional[Path] = None):
        """Initialize and validate the provider.

        Args:
            config: Provider configuration.
            conventions_file: Explicit conventions file for the system instruction.

        Raises:
            ProviderConfigError: If the configuration is unusable.
        """
        self.config = config
        self.model = config.model
        self.base_url = config.base_url
        self.conventions_file = conventions_file
        self.validate_config()

    @abstractmethod
    def validate_config(self) -> None:
        """Check the configuration before any request is made.

        Raises:
            ProviderConfigError: If the configuration is unusable.
        """
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Return True if the provider has everything it needs to make a request."""
        pass

    @abstractmethod
    def complete(self, system_prompt: str, files: list[str], patch: str) -> str:
        """Send one request to the backend and return the raw reply text.

        Args:
            system_prompt: The conventions text.
            files: Changed file paths.
            patch: The unified diff text.

        Returns:
            The unprocessed reply.

        Raises:
            LLMError: For any transport, protocol or decoding failure.
        """
        pass

    def generate(self, files: list[str], patch: str) -> str:
        """Generate a single-line commit message.

        Args:
            files: Changed file paths.
            patch: The unified diff text.

        Returns:
            The sanitized message.

        Raises:
            LLMError: If the request fails. Never retried.
        """
        conventions, source = load_conventions(self.conventions_file)
        logger.debug("Requesting message from %s (%s, conventions: %s)", self.name, self.model, source)
        raw_response = self.complete(conventions, files, patch)
        message = sanitize_message(raw_response)
        logger.debug("Raw %s reply %r sanitized to %r", self.name, raw_response, message)
        return message


class RemoteHostedProvider(BaseLLMProvider):
    """A hosted backend authenticated with an API key."""

    #: Required API key prefix, empty for no check
    api_key_prefix: str = ""

    #: Environment variable users set the key in (for help text)
    api_key_env_var: str = ""

    def validate_config(self) -> None:
        api_key = self.config.api_key
        if not api_key:
            raise MissingAPIKeyError(
                f"{self.name} API key not found",
                provider=self.name,
                help=f"Set it with: export {self.api_key_env_var}=your-key-here "
                     f"(or add it to your ~/.env file)",
            )
        if self.api_key_prefix and not api_key.startswith(self.api_key_prefix):
            raise InvalidAPIKeyError(
                f"Invalid {self.name} API key (expected prefix '{self.api_key_prefix}')",
                provider=self.name,
                help=f"Check the value of {self.api_key_env_var}",
            )
        self.api_key = api_key

    def is_configured(self) -> bool:
        return bool(self.api_key) and bool(self.model)


class LocalProvider(BaseLLMProvider):
    """A local model server reachable without credentials."""

    def validate_config(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ProviderConfigError(
                f"Invalid {self.name} base URL: {self.base_url!r}",
                provider=self.name,
                help="Set COMMITGEN_BASE_URL to an http:// or https:// URL",
            )

    def is_configured(self) -> bool:
        return bool(self.model) and bool(self.base_url)


def translate_sdk_error(error: Exception, provider: str, sdk) -> LLMError:
    """Map an openai/anthropic SDK exception onto the provider error taxonomy.

    Both SDKs expose APITimeoutError, APIConnectionError, APIStatusError and
    APIResponseValidationError.

    Args:
        error: The exception raised by the SDK.
        provider: The provider name.
        sdk: The SDK module the exception came from.

    Returns:
        The matching LLMError.
    """
    if isinstance(error, sdk.APIResponseValidationError):
        return ResponseParseError(f"Malformed {provider} response: {error}", provider=provider)
    if isinstance(error, sdk.APITimeoutError):
        return ProviderTimeoutError(f"{provider} request timed out", provider=provider)
    if isinstance(error, sdk.APIConnectionError):
        return NetworkError(f"Network error: {error}", provider=provider)
    if isinstance(error, sdk.APIStatusError):
        return error_for_status(error.status_code, provider, getattr(error, "message", str(error)))
    return LLMError(f"{provider} API call failed: {error}", provider=provider)
