# src/colloquy/config.py
"""Configuration loading utilities for Colloquy.

This module provides configuration loading that can be used by:
- CLI commands
- External applications using Colloquy as a library

It handles:
- Finding and loading colloquy.yaml config files
- Loading .env files for API keys
- Building Settings objects from multiple sources
- Loading persona definitions
- Creating Colloquy instances from configuration
"""

from __future__ import annotations

import importlib
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml
from pydantic import ValidationError

from colloquy.persona import Persona

if TYPE_CHECKING:
    from colloquy.colloquy import Colloquy
    from colloquy.settings import Settings

logger = logging.getLogger(__name__)

CONFIG_FILES = ["colloquy.yaml", "colloquy.yml", ".colloquyrc"]
ENV_FILE = ".env"
ENV_PREFIX = "COLLOQUY_"


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


MAX_SEARCH_DEPTH = 10


def _parse_env_line(line: str) -> tuple[str, str] | None:
    """Split ``KEY=value`` (optionally ``export KEY="value"``) into a pair."""
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    if line.startswith("export "):
        line = line[len("export ") :]
    key, _, value = line.partition("=")
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return key.strip(), value


def load_env_file(env_path: str | Path = ENV_FILE) -> dict[str, str]:
    """Export the variables of a .env file into ``os.environ``.

    Variables already present in the environment keep their value.

    Returns:
        The variables that were set
    """
    path = Path(env_path)
    if not path.is_file():
        return {}

    applied: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        pair = _parse_env_line(line)
        if pair is None or pair[0] in os.environ:
            continue
        os.environ[pair[0]] = applied[pair[0]] = pair[1]

    if applied:
        logger.debug("Loaded %s from %s", ", ".join(sorted(applied)), path)
    return applied


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest config file in ``start_dir`` (default: cwd) or above it."""
    start = start_dir or Path.cwd()
    for directory in [start, *start.parents][:MAX_SEARCH_DEPTH]:
        for name in CONFIG_FILES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


VALID_ROOT_KEYS = {
    # Provider config
    "provider",
    "llm_model",
    "embedding_model",
    "api_base",
    # Custom provider
    "embedder",
    "llm_client",
    "embedder_kwargs",
    "llm_client_kwargs",
    # Knowledge and persona
    "persona",
    "documents",
    "builtin_knowledge",
    # Settings section
    "settings",
}

# Settings keys that can be set from YAML, with the parser used for COLLOQUY_* env values
SETTINGS_PARSERS: dict[str, Callable[[str], Any]] = {
    "chunk_size": int,
    "chunk_overlap": int,
    "default_k": int,
    "min_score": float,
    "history_turns": int,
    "max_prompt_chars": int,
    "max_response_chars": int,
    "temperature": float,
    "top_p": float,
    "max_tokens": int,
    "generation_timeout": float,
    "interrupt_policy": str,
    "pending_policy": str,
    "max_pending_inputs": int,
    "num_retries": int,
    "output_profile": str,
}

VALID_SETTINGS_KEYS = {*SETTINGS_PARSERS, "stop_sequences"}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Return human-readable warnings about unknown or mistyped keys."""
    where = str(config_path) if config_path else "config"
    warnings: list[str] = []

    unknown = sorted(set(config) - VALID_ROOT_KEYS)
    if unknown:
        warnings.append(f"Unknown config keys in {where}: {', '.join(unknown)}")

    settings = config.get("settings")
    if settings is not None and not isinstance(settings, dict):
        warnings.append(f"'settings' in {where} must be a mapping")
    elif settings:
        unknown = sorted(set(settings) - VALID_SETTINGS_KEYS)
        if unknown:
            warnings.append(f"Unknown settings keys: {', '.join(unknown)}")

    documents = config.get("documents")
    if documents is not None and not isinstance(documents, list):
        warnings.append(f"'documents' in {where} must be a list of paths")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return cast(dict[str, Any], config)


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from COLLOQUY_* environment variables.

    Returns values that were explicitly set (not defaults), to allow proper
    precedence: YAML settings are used unless overridden by env vars.
    Unparseable values are logged and ignored.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    for key, parse in SETTINGS_PARSERS.items():
        env_name = f"{ENV_PREFIX}{key.upper()}"
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            result[key] = parse(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a valid %s", env_name, raw, parse.__name__)

    if stops := os.environ.get(f"{ENV_PREFIX}STOP_SEQUENCES"):
        # Pipe-separated, with \n escapes
        result["stop_sequences"] = tuple(
            s.replace("\\n", "\n") for s in stops.split("|") if s
        )

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the 'settings:' section of a YAML config.

    Args:
        config: The loaded YAML configuration

    Returns:
        Dictionary of setting name -> value
    """
    yaml_settings = config.get("settings") or {}
    if not isinstance(yaml_settings, dict):
        return {}
    result = {key: value for key, value in yaml_settings.items() if key in VALID_SETTINGS_KEYS}
    if "stop_sequences" in result:
        result["stop_sequences"] = tuple(result["stop_sequences"])
    return result


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build a Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Output profile named by ``output_profile``
    4. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance
    """
    from colloquy.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    merged = {**yaml_settings, **env_settings}
    output_profile = merged.pop("output_profile", None)

    if output_profile:
        return Settings.with_profile(output_profile, **merged)
    return Settings(**merged)


def load_persona(
    persona: str | Path | dict[str, Any] | None,
    base_dir: Path | None = None,
    default: Persona | None = None,
) -> Persona:
    """Load a persona from an inline mapping or a YAML file.

    Args:
        persona: Mapping of Persona fields, path to a YAML file holding one,
                 or None for ``default``
        base_dir: Directory relative persona paths are resolved against
        default: Persona returned when ``persona`` is None

    Raises:
        FileNotFoundError: If a persona file does not exist
        ValueError: If the definition is not a valid Persona
    """
    if persona is None:
        return default if default is not None else Persona()

    if isinstance(persona, (str, Path)):
        path = Path(persona)
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        if not path.exists():
            raise FileNotFoundError(f"Persona file not found: {path}")
        with open(path, encoding="utf-8") as f:
            persona = yaml.safe_load(f) or {}

    if not isinstance(persona, dict):
        raise ValueError("Persona definition must be a mapping of persona fields")

    try:
        return Persona.model_validate(persona)
    except ValidationError as e:
        raise ValueError(f"Invalid persona definition: {e}") from e


def import_class(class_path: str) -> type[Any]:
    """Import a class from a dotted path like 'my_package.module.ClassName'.

    Args:
        class_path: Dotted path to class

    Returns:
        The imported class
    """
    module_path, class_name = class_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return cast(type[Any], getattr(module, class_name))


@dataclass
class ColloquyConfig:
    """Configuration for creating a Colloquy instance."""

    provider: str
    settings: Settings
    persona: Persona
    llm_model: str | None = None
    embedding_model: str | None = None
    api_base: str | None = None
    api_key: str | None = None
    documents: list[Path] = field(default_factory=list)
    builtin_knowledge: bool = True
    # Custom provider fields
    embedder_class: str | None = None
    llm_client_class: str | None = None
    embedder_kwargs: dict[str, Any] | None = None
    llm_client_kwargs: dict[str, Any] | None = None


def get_colloquy_config(
    config_path: str | Path | None = None,
) -> ColloquyConfig | ConfigError:
    """Get configuration for creating a Colloquy instance.

    This extracts configuration without creating the instance, allowing
    the caller to handle errors and missing values appropriately.

    Args:
        config_path: Override config file path

    Returns:
        ColloquyConfig with all settings, or ConfigError if invalid
    """
    resolved_path = Path(config_path) if config_path is not None else find_config_file()
    if resolved_path is not None and not resolved_path.exists():
        return ConfigError(message=f"Config file not found: {resolved_path}")

    try:
        config = load_config(resolved_path) if resolved_path is not None else {}
    except yaml.YAMLError as e:
        return ConfigError(
            message=f"Could not parse {resolved_path}: {e}",
            suggestion="Check the YAML syntax of your config file",
        )

    base_dir = resolved_path.parent if resolved_path is not None else Path.cwd()
    provider = config.get("provider", "litellm")
    builtin_knowledge = bool(config.get("builtin_knowledge", True))

    try:
        settings = build_settings(config)
    except (ValidationError, ValueError) as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the settings section and COLLOQUY_* environment variables",
        )

    from colloquy.knowledge import MAX_PERSONA

    try:
        persona = load_persona(
            config.get("persona"),
            base_dir=base_dir,
            default=MAX_PERSONA if builtin_knowledge else Persona(),
        )
    except (FileNotFoundError, ValueError) as e:
        return ConfigError(message=str(e), suggestion="Fix the persona entry in colloquy.yaml")

    raw_documents = config.get("documents") or []
    if not isinstance(raw_documents, list):
        return ConfigError(
            message="'documents' must be a list of file paths",
            suggestion="Use a YAML list, one path per line",
        )
    documents = [base_dir / str(doc) for doc in raw_documents]

    if provider == "litellm":
        from colloquy.configuration.providers.litellm import HASHING_PREFIX
        from colloquy.providers.litellm.models import ChatModels

        return ColloquyConfig(
            provider=provider,
            settings=settings,
            persona=persona,
            llm_model=config.get("llm_model")
            or os.environ.get(f"{ENV_PREFIX}LLM_MODEL")
            or ChatModels.OLLAMA_TINYLLAMA,
            embedding_model=config.get("embedding_model")
            or os.environ.get(f"{ENV_PREFIX}EMBEDDING_MODEL")
            or HASHING_PREFIX,
            api_base=config.get("api_base") or os.environ.get(f"{ENV_PREFIX}API_BASE"),
            api_key=os.environ.get(f"{ENV_PREFIX}API_KEY"),
            documents=documents,
            builtin_knowledge=builtin_knowledge,
        )

    elif provider == "custom":
        embedder_class = config.get("embedder")
        llm_client_class = config.get("llm_client")

        if not embedder_class or not llm_client_class:
            return ConfigError(
                message="Custom provider requires embedder and llm_client.",
                suggestion="Add these to colloquy.yaml as dotted class paths",
            )

        return ColloquyConfig(
            provider=provider,
            settings=settings,
            persona=persona,
            documents=documents,
            builtin_knowledge=builtin_knowledge,
            embedder_class=embedder_class,
            llm_client_class=llm_client_class,
            embedder_kwargs=config.get("embedder_kwargs", {}),
            llm_client_kwargs=config.get("llm_client_kwargs", {}),
        )

    else:
        return ConfigError(
            message=f"Unknown provider '{provider}'",
            suggestion="Supported providers: litellm, custom",
        )


def create_colloquy(config: ColloquyConfig) -> Colloquy:
    """Create a Colloquy instance from configuration.

    The instance is returned empty; ingest knowledge with ``Colloquy.ingest``.

    Args:
        config: Configuration for the Colloquy instance

    Returns:
        Configured Colloquy instance

    Raises:
        ImportError: If custom provider classes cannot be imported
    """
    from colloquy.colloquy import Colloquy
    from colloquy.configuration import LiteLLMProvider

    if config.provider == "litellm":
        return Colloquy(
            provider=LiteLLMProvider(
                llm=config.llm_model or LiteLLMProvider.llm,
                embedding=config.embedding_model or LiteLLMProvider.embedding,
                api_base=config.api_base,
                api_key=config.api_key,
            ),
            settings=config.settings,
            persona=config.persona,
        )

    elif config.provider == "custom":
        if not config.embedder_class or not config.llm_client_class:
            raise ValueError("Custom provider requires all class paths")

        embedder = import_class(config.embedder_class)(**(config.embedder_kwargs or {}))
        llm_client = import_class(config.llm_client_class)(**(config.llm_client_kwargs or {}))

        @dataclass(frozen=True)
        class _CustomProvider:
            """Inline provider for custom implementations."""

            _embedder: Any
            _llm_client: Any

            def build_embedder(self, settings: Settings) -> Any:
                return self._embedder

            def build_llm_client(self, settings: Settings) -> Any:
                return self._llm_client

        return Colloquy(
            provider=_CustomProvider(_embedder=embedder, _llm_client=llm_client),
            settings=config.settings,
            persona=config.persona,
        )

    else:
        raise ValueError(f"Unknown provider: {config.provider}")
