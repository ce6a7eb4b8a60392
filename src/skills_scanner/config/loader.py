"""Configuration file loading.

Handles loading the launcher configuration from YAML with:
- Global config ($SKILLS_SCANNER_HOME/config.yml)
- Environment variable expansion (${VAR})
- Fallback to built-in defaults for anything not set
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from skills_scanner.bootstrap.paths import LauncherPaths
from skills_scanner.config.models import (
    DEFAULT_STRATEGIES,
    LauncherConfig,
    ResolutionConfig,
)
from skills_scanner.config.validation import VALID_STRATEGIES, validate_config
from skills_scanner.core.logging import LOG_LEVELS, get_logger

LOGGER = get_logger(__name__)

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def load_config(config_path: Optional[Path] = None) -> LauncherConfig:
    """Load the launcher configuration.

    Args:
        config_path: Config file to read. Defaults to config.yml in the
            launcher home directory.

    Returns:
        LauncherConfig instance; defaults when no config file exists.

    Raises:
        ConfigError: If the config file cannot be read or parsed.
    """
    path = config_path or find_global_config()
    if path is None or not path.exists():
        LOGGER.debug("No config file found, using defaults")
        return get_default_config()

    try:
        data = load_yaml_file(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot decode config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    validate_config(data, source=str(path))
    config = dict_to_config(data)
    config._config_sources = [str(path)]

    LOGGER.debug(f"Loaded config from {path}")
    return config


def find_global_config() -> Optional[Path]:
    """Find the config file in the launcher home directory.

    Returns:
        Path to config.yml if it exists, None otherwise.
    """
    config_path = LauncherPaths.default().config_file
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed dictionary.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.

    Args:
        data: Config data (dict, list, or scalar).

    Returns:
        Data with environment variables expanded.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def dict_to_config(data: Dict[str, Any]) -> LauncherConfig:
    """Convert a config dict to a typed LauncherConfig.

    Invalid values fall back to their defaults; validate_config has
    already warned about them.

    Args:
        data: Configuration dictionary.

    Returns:
        Typed LauncherConfig instance.
    """
    defaults = LauncherConfig()

    log_level = data.get("log_level")
    if not isinstance(log_level, str) or log_level.lower() not in LOG_LEVELS:
        log_level = defaults.log_level

    resolution_data = data.get("resolution")
    if not isinstance(resolution_data, dict):
        resolution_data = {}

    return LauncherConfig(
        log_level=log_level.lower(),
        resolution=ResolutionConfig(
            namespace=_non_empty_str(
                resolution_data.get("namespace"), defaults.resolution.namespace
            ),
            strategies=_parse_strategies(resolution_data.get("strategies")),
            local_build_dir=_non_empty_str(
                resolution_data.get("local_build_dir"),
                defaults.resolution.local_build_dir,
            ),
        ),
    )


def _parse_strategies(value: Any) -> List[str]:
    """Keep known strategy names in order, dropping duplicates."""
    if not isinstance(value, list):
        return list(DEFAULT_STRATEGIES)

    strategies: List[str] = []
    for name in value:
        if isinstance(name, str) and name in VALID_STRATEGIES and name not in strategies:
            strategies.append(name)

    if not strategies:
        LOGGER.warning("No valid resolution strategies configured, using defaults")
        return list(DEFAULT_STRATEGIES)
    return strategies


def _non_empty_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def get_default_config() -> LauncherConfig:
    """Get the built-in default configuration.

    Returns:
        Default LauncherConfig instance.
    """
    return LauncherConfig()
