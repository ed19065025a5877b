"""LLM-related exception classes.

Contains all exception classes for provider operations:
- LLMError: Base exception for provider errors
- ProviderConfigError: Configuration is unusable (raised before any request)
  - UnknownProviderError, MissingAPIKeyError, InvalidAPIKeyError
- NetworkError: The backend could not be reached
  - ProviderTimeoutError
- ProviderResponseError: The backend answered with a non-success status
  - RateLimitError, ServiceUnavailableError
- ResponseParseError: The response body is malformed
  - EmptyResponseError

Every error carries the provider name and a short help line for the user.
None of them is fatal: the generator falls back to heuristics.
"""

from typing import Optional


class LLMError(Exception):
    """Base exception for provider errors."""

    default_help = "commitgen will fall back to heuristic message generation."

    def __init__(self, message: str, provider: str = "", help: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.help = help or self.default_help

    def __str__(self) -> str:
        if self.provider:
            return f"provider {self.provider}: {self.message}"
        return self.message


class ProviderConfigError(LLMError):
    """Raised when the provider configuration is unusable."""

    default_help = "Check your configuration file or environment variables."


class UnknownProviderError(ProviderConfigError):
    """Raised when the configured provider name is not supported."""

    pass


class MissingAPIKeyError(ProviderConfigError):
    """Raised when the required API key is not set."""

    pass


class InvalidAPIKeyError(ProviderConfigError):
    """Raised when the API key is malformed or rejected by the backend."""

    pass


class NetworkError(LLMError):
    """Raised when the backend cannot be reached."""

    default_help = (
        "Check your internet connection and try again. "
        "Use 'commitgen cached' for a previously generated message."
    )


class ProviderTimeoutError(NetworkError):
    """Raised when the backend does not answer within the timeout."""

    pass


class ProviderResponseError(LLMError):
    """Raised when the backend answers with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        provider: str = "",
        help: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, provider=provider, help=help)
        self.status_code = status_code


class RateLimitError(ProviderResponseError):
    """Raised on HTTP 429."""

    default_help = "Wait a moment and try again, or upgrade your plan."


class ServiceUnavailableError(ProviderResponseError):
    """Raised on HTTP 5xx."""

    default_help = "Try again in a few moments or use 'commitgen cached'."


class ResponseParseError(LLMError):
    """Raised when the response body cannot be decoded."""

    pass


class EmptyResponseError(ResponseParseError):
    """Raised when the response contains no generated text."""

    pass


def error_for_status(status_code: int, provider: str, detail: str = "") -> LLMError:
    """Map a non-success HTTP status to the matching error.

    Args:
        status_code: The HTTP status code.
        provider: The provider name.
        detail: Response body or SDK message, for diagnostics.

    Returns:
        InvalidAPIKeyError for 401, RateLimitError for 429,
        ServiceUnavailableError for 5xx, ProviderResponseError otherwise.
    """
    if status_code == 401:
        return InvalidAPIKeyError(f"Invalid or missing {provider} API key", provider=provider)
    if status_code == 429:
        return RateLimitError(
            f"{provider} API rate limit exceeded", provider=provider, status_code=status_code
        )
    if 500 <= status_code < 600:
        return ServiceUnavailableError(
            f"{provider} service temporarily unavailable (HTTP {status_code})",
            provider=provider,
            status_code=status_code,
        )

    message = f"{provider} API error (HTTP {status_code})"
    if detail:
        message += f": {detail}"
    return ProviderResponseError(message, provider=provider, status_code=status_code)
