"""Configuration for commitgen.

Settings are read from a YAML config file and environment variables and
returned as an explicit Settings value that callers pass around.

Config file lookup (first existing wins):
    ./commitgen.yaml, ./commitgen.yml, ~/.commitgen.yaml, ~/.commitgen.yml

Environment variables always take precedence over the config file.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""

    pass


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    OPENROUTER = "openrouter"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.OPENAI
DEFAULT_PATCH_BYTES = 100 * 1024
DEFAULT_CACHE_DIR = Path.home() / ".cache" / "commitgen"

# Request shaping shared by every backend
MAX_TOKENS = 100
TEMPERATURE = 0.1

DEFAULT_MODELS = {
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.OPENROUTER: "openai/gpt-4o-mini",
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
    LLMProvider.OLLAMA: "llama3.2:3b",
}

DEFAULT_BASE_URLS = {
    LLMProvider.OPENAI: "https://api.openai.com/v1",
    LLMProvider.OPENROUTER: "https://openrouter.ai/api/v1",
    LLMProvider.ANTHROPIC: "https://api.anthropic.com",
    LLMProvider.OLLAMA: "http://localhost:11434",
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OLLAMA: None,
}

CONFIG_FILE_NAMES = ("commitgen.yaml", "commitgen.yml")
HOME_CONFIG_FILE_NAMES = (".commitgen.yaml", ".commitgen.yml")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ProviderConfig:
    """Everything a provider needs to talk to its backend. Never persisted."""

    provider: str
    api_key: str = ""
    model: str = ""
    base_url: str = ""


@dataclass
class Settings:
    """Effective commitgen settings."""

    ai_enabled: bool = False
    provider: str = DEFAULT_PROVIDER.value
    api_key: str = ""
    model: str = ""
    base_url: str = ""
    patch_bytes: int = DEFAULT_PATCH_BYTES
    cache_dir: Path = field(default_factory=lambda: DEFAULT_CACHE_DIR)
    use_cache: bool = True
    conventions_file: Optional[Path] = None
    verbose: bool = False
    config_file: Optional[Path] = None

    def provider_config(self) -> ProviderConfig:
        """Build the provider configuration, filling per-provider defaults.

        Unknown provider names are passed through untouched so that the
        provider factory can report them.
        """
        try:
            provider = LLMProvider(self.provider)
        except ValueError:
            return ProviderConfig(
                provider=self.provider,
                api_key=self.api_key,
                model=self.model,
                base_url=self.base_url,
            )

        return ProviderConfig(
            provider=provider.value,
            api_key=self.api_key,
            model=self.model or DEFAULT_MODELS[provider],
            base_url=(self.base_url or DEFAULT_BASE_URLS[provider]).rstrip("/"),
        )


def get_api_key_env_var(provider: str) -> Optional[str]:
    """Get the environment variable name for a provider's API key.

    Args:
        provider: The provider name.

    Returns:
        The environment variable name, or None if the provider needs no key.
    """
    try:
        return API_KEY_ENV_VARS[LLMProvider(provider)]
    except ValueError:
        return None


def find_config_file(cwd: Optional[Path] = None, home: Optional[Path] = None) -> Optional[Path]:
    """Return the first existing config file, or None.

    Args:
        cwd: Directory searched first. Defaults to the current directory.
        home: Home directory searched second. Defaults to the user's home.
    """
    cwd = cwd or Path.cwd()
    home = home or Path.home()

    candidates = [cwd / name for name in CONFIG_FILE_NAMES]
    candidates += [home / name for name in HOME_CONFIG_FILE_NAMES]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_config_file(config_file: Path) -> Dict[str, Any]:
    """Load a YAML config file.

    Args:
        config_file: Path to the YAML file.

    Returns:
        The parsed mapping (empty for an empty file).

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return config


def load_env_files(cwd: Optional[Path] = None, home: Optional[Path] = None) -> None:
    """Load ~/.env, ./.env and ./.env.local without overriding set variables."""
    cwd = cwd or Path.cwd()
    home = home or Path.home()
    for env_file in (home / ".env", cwd / ".env", cwd / ".env.local"):
        if env_file.is_file():
            load_dotenv(env_file, override=False)


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def apply_file_config(settings: Settings, config: Dict[str, Any]) -> Settings:
    """Overlay values from a parsed config file onto settings.

    Sections: ai, performance, cache, advanced. Malformed values are ignored.

    Raises:
        ConfigError: If a section is present but is not a mapping.
    """
    ai = _section(config, "ai")
    performance = _section(config, "performance")
    cache = _section(config, "cache")
    advanced = _section(config, "advanced")

    changes: Dict[str, Any] = {}

    enabled = _parse_bool(ai.get("enabled"))
    if enabled is not None:
        changes["ai_enabled"] = enabled
    for key in ("provider", "api_key", "model", "base_url"):
        if ai.get(key):
            changes[key] = str(ai[key])

    patch_bytes = _parse_int(performance.get("patch_bytes"))
    if patch_bytes is not None:
        changes["patch_bytes"] = patch_bytes

    if cache.get("dir"):
        changes["cache_dir"] = Path(str(cache["dir"])).expanduser()
    use_cache = _parse_bool(cache.get("enabled"))
    if use_cache is not None:
        changes["use_cache"] = use_cache

    if advanced.get("conventions_file"):
        changes["conventions_file"] = Path(str(advanced["conventions_file"])).expanduser()
    verbose = _parse_bool(advanced.get("verbose"))
    if verbose is not None:
        changes["verbose"] = verbose

    return replace(settings, **changes)


def apply_env_overrides(settings: Settings, environ: Optional[Dict[str, str]] = None) -> Settings:
    """Overlay COMMITGEN_* and provider API key variables onto settings."""
    environ = os.environ if environ is None else environ
    changes: Dict[str, Any] = {}

    ai_enabled = _parse_bool(environ.get("COMMITGEN_AI"))
    if ai_enabled is not None:
        changes["ai_enabled"] = ai_enabled

    provider = environ.get("COMMITGEN_PROVIDER")
    if provider:
        changes["provider"] = provider.strip().lower()

    # The key variable depends on the (possibly overridden) provider
    key_var = get_api_key_env_var(changes.get("provider", settings.provider))
    if key_var and environ.get(key_var):
        changes["api_key"] = environ[key_var]

    if environ.get("COMMITGEN_MODEL"):
        changes["model"] = environ["COMMITGEN_MODEL"]
    if environ.get("COMMITGEN_BASE_URL"):
        changes["base_url"] = environ["COMMITGEN_BASE_URL"]

    patch_bytes = _parse_int(environ.get("COMMITGEN_PATCH_BYTES"))
    if patch_bytes is not None:
        changes["patch_bytes"] = patch_bytes

    if environ.get("COMMITGEN_CACHE_DIR"):
        changes["cache_dir"] = Path(environ["COMMITGEN_CACHE_DIR"]).expanduser()
    if environ.get("COMMITGEN_CONVENTIONS_FILE"):
        changes["conventions_file"] = Path(environ["COMMITGEN_CONVENTIONS_FILE"]).expanduser()

    verbose = _parse_bool(environ.get("COMMITGEN_VERBOSE"))
    if verbose is not None:
        changes["verbose"] = verbose

    return replace(settings, **changes)


def load_settings(
    config_file: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
    load_env: bool = True,
) -> Settings:
    """Load the effective settings.

    Args:
        config_file: Explicit config file. Defaults to the first one found.
        environ: Environment mapping. Defaults to os.environ.
        load_env: Whether to load .env files into os.environ first.

    Returns:
        The effective Settings.

    Raises:
        ConfigError: If the config file exists but cannot be parsed.
    """
    if load_env and environ is None:
        load_env_files()

    settings = Settings()

    config_file = config_file or find_config_file()
    if config_file is not None:
        settings = apply_file_config(settings, load_config_file(config_file))
        settings = replace(settings, config_file=config_file)

    return apply_env_overrides(settings, environ)
