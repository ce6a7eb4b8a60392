"""Configuration package for the skills-scanner launcher.

Loads config.yml from the launcher home directory.
"""

from __future__ import annotations

from skills_scanner.config.loader import ConfigError, load_config
from skills_scanner.config.models import (
    DEFAULT_STRATEGIES,
    LOCAL_BUILD_STRATEGY,
    OPTIONAL_PACKAGE_STRATEGY,
    LauncherConfig,
    ResolutionConfig,
)

__all__ = [
    "ConfigError",
    "load_config",
    "DEFAULT_STRATEGIES",
    "LOCAL_BUILD_STRATEGY",
    "OPTIONAL_PACKAGE_STRATEGY",
    "LauncherConfig",
    "ResolutionConfig",
]
