"""Configuration validation for the skills-scanner launcher.

Validates known configuration keys and warns on anything else.
Never raises; problems are reported as warnings.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from skills_scanner.config.models import DEFAULT_STRATEGIES
from skills_scanner.core.logging import LOG_LEVELS, get_logger

LOGGER = get_logger(__name__)

VALID_TOP_LEVEL_KEYS: Set[str] = {
    "log_level",
    "resolution",
}

VALID_RESOLUTION_KEYS: Set[str] = {
    "namespace",
    "strategies",
    "local_build_dir",
}

VALID_STRATEGIES: Set[str] = set(DEFAULT_STRATEGIES)


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        warnings.append(ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        ))
        return warnings

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            warnings.append(ConfigValidationWarning(
                message=f"Unknown top-level key '{key}'",
                source=source,
                key=str(key),
                suggestion=_suggest_key(str(key), VALID_TOP_LEVEL_KEYS),
            ))

    log_level = data.get("log_level")
    if log_level is not None:
        if not isinstance(log_level, str):
            warnings.append(ConfigValidationWarning(
                message=f"'log_level' must be a string, got {type(log_level).__name__}",
                source=source,
                key="log_level",
            ))
        elif log_level.lower() not in LOG_LEVELS:
            warnings.append(ConfigValidationWarning(
                message=(
                    f"Invalid log_level '{log_level}'. "
                    f"Valid values: {', '.join(sorted(LOG_LEVELS))}"
                ),
                source=source,
                key="log_level",
                suggestion=_suggest_key(log_level.lower(), set(LOG_LEVELS)),
            ))

    resolution = data.get("resolution")
    if resolution is not None:
        warnings.extend(_validate_resolution(resolution, source))

    for warning in warnings:
        _log_warning(warning)

    return warnings


def _validate_resolution(
    resolution: Any,
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate the resolution section."""
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(resolution, dict):
        warnings.append(ConfigValidationWarning(
            message=f"'resolution' must be a mapping, got {type(resolution).__name__}",
            source=source,
            key="resolution",
        ))
        return warnings

    for key in resolution.keys():
        if key not in VALID_RESOLUTION_KEYS:
            warnings.append(ConfigValidationWarning(
                message=f"Unknown key 'resolution.{key}'",
                source=source,
                key=f"resolution.{key}",
                suggestion=_suggest_key(str(key), VALID_RESOLUTION_KEYS),
            ))

    for key in ("namespace", "local_build_dir"):
        value = resolution.get(key)
        if value is not None and (not isinstance(value, str) or not value.strip()):
            warnings.append(ConfigValidationWarning(
                message=f"'resolution.{key}' must be a non-empty string",
                source=source,
                key=f"resolution.{key}",
            ))

    strategies = resolution.get("strategies")
    if strategies is not None:
        if not isinstance(strategies, list):
            warnings.append(ConfigValidationWarning(
                message=(
                    "'resolution.strategies' must be a list, "
                    f"got {type(strategies).__name__}"
                ),
                source=source,
                key="resolution.strategies",
            ))
        else:
            for name in strategies:
                if not isinstance(name, str) or name not in VALID_STRATEGIES:
                    warnings.append(ConfigValidationWarning(
                        message=f"Unknown resolution strategy '{name}'",
                        source=source,
                        key="resolution.strategies",
                        suggestion=_suggest_key(str(name), VALID_STRATEGIES),
                    ))

    return warnings


def _suggest_key(key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a similar valid key for typos."""
    matches = get_close_matches(key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    message = f"{warning.source}: {warning.message}"
    if warning.suggestion:
        message += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(message)
