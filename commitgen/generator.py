"""Commit message generation pipeline.

The generator walks a fixed sequence for each change set:

    check cache -> hit: done
                -> miss: AI requested and configured? -> call provider
                                                         -> success: persist, done
                                                         -> failure: heuristics
                         otherwise -> heuristics

There is exactly one provider attempt per call and no retries. Whatever
happens, generate() returns one non-empty single-line message.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from commitgen.cache import load_cached_message, save_cached_message
from commitgen.config import ProviderConfig, Settings
from commitgen.heuristics import classify
from commitgen.llm import BaseLLMProvider, LLMError, get_provider

logger = logging.getLogger(__name__)

HEURISTICS_PROVIDER = "heuristics"
CACHE_SOURCE = "cache"


@dataclass
class GenerationResult:
    """Outcome of one pipeline run."""

    message: str
    # "cache", a backend name, or "heuristics"
    source: str
    # Backend that originally produced the message (differs from source on a cache hit)
    provider: str
    # Provider error that caused a fallback to heuristics, if any
    error: Optional[BaseException] = None

    @property
    def from_cache(self) -> bool:
        return self.source == CACHE_SOURCE

    @property
    def fell_back(self) -> bool:
        return self.error is not None


class MessageGenerator:
    """Compose the cache, an optional AI provider and the heuristic classifier."""

    def __init__(
        self,
        cache_dir: Path,
        use_cache: bool = True,
        ai_enabled: bool = False,
        provider_config: Optional[ProviderConfig] = None,
        conventions_file: Optional[Path] = None,
        provider: Optional[BaseLLMProvider] = None,
    ):
        """Initialize the generator.

        Args:
            cache_dir: Directory of the message cache.
            use_cache: Whether to read and write the cache.
            ai_enabled: Whether an AI provider should be tried.
            provider_config: Configuration used to build the provider lazily.
            conventions_file: Explicit conventions file for the provider.
            provider: A ready provider instance (takes precedence over
                provider_config).
        """
        self.cache_dir = cache_dir
        self.use_cache = use_cache
        self.ai_enabled = ai_enabled
        self.provider_config = provider_config
        self.conventions_file = conventions_file
        self._provider = provider

    @classmethod
    def from_settings(cls, settings: Settings, ai_enabled: Optional[bool] = None) -> "MessageGenerator":
        """Build a generator from loaded settings.

        Args:
            settings: The effective settings.
            ai_enabled: Override for settings.ai_enabled (e.g. from --ai/--no-ai).
        """
        return cls(
            cache_dir=settings.cache_dir,
            use_cache=settings.use_cache,
            ai_enabled=settings.ai_enabled if ai_enabled is None else ai_enabled,
            provider_config=settings.provider_config(),
            conventions_file=settings.conventions_file,
        )

    def resolve_provider(self) -> Optional[BaseLLMProvider]:
        """Return the configured provider, building it on first use.

        Raises:
            ProviderConfigError: If the configuration is invalid.
        """
        if self._provider is None and self.provider_config is not None:
            self._provider = get_provider(self.provider_config, conventions_file=self.conventions_file)
        return self._provider

    def generate(self, files: list[str], patch: str, regenerate: bool = False) -> GenerationResult:
        """Produce a commit message for a change set.

        Args:
            files: Changed file paths, in the order reported by git.
            patch: The (possibly truncated) unified diff.
            regenerate: Skip the cache lookup (results are still cached).

        Returns:
            The GenerationResult. Never raises for provider or cache problems.
        """
        if self.use_cache and not regenerate:
            cached = load_cached_message(self.cache_dir, files, patch)
            if cached is not None:
                return GenerationResult(
                    message=cached.message, source=CACHE_SOURCE, provider=cached.provider
                )

        if not self.ai_enabled:
            return self._heuristic(files, patch)

        try:
            provider = self.resolve_provider()
        except LLMError as e:
            logger.warning("AI provider unavailable (%s), using heuristics", e)
            return self._heuristic(files, patch, error=e)

        if provider is None or not provider.is_configured():
            logger.debug("AI requested but no provider is configured, using heuristics")
            return self._heuristic(files, patch)

        try:
            message = provider.generate(files, patch)
        except LLMError as e:
            logger.warning("AI provider %s failed (%s), using heuristics", provider.name, e)
            return self._heuristic(files, patch, error=e)
        except KeyboardInterrupt as e:
            logger.warning("AI request to %s interrupted, using heuristics", provider.name)
            return self._heuristic(files, patch, error=e)
        except Exception as e:
            # SDK and transport exceptions not covered by the taxonomy
            error = LLMError(f"{provider.name} API call failed: {e}", provider=provider.name)
            logger.warning("AI provider %s failed unexpectedly (%s), using heuristics", provider.name, e)
            return self._heuristic(files, patch, error=error)

        if self.use_cache:
            save_cached_message(self.cache_dir, files, patch, message, provider.name)

        return GenerationResult(message=message, source=provider.name, provider=provider.name)

    def _heuristic(
        self,
        files: list[str],
        patch: str,
        error: Optional[BaseException] = None,
    ) -> GenerationResult:
        message = classify(files, patch)
        logger.debug("Heuristic message: %s", message)
        return GenerationResult(
            message=message,
            source=HEURISTICS_PROVIDER,
            provider=HEURISTICS_PROVIDER,
            error=error,
        )
