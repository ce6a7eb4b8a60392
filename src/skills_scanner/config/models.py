"""Configuration data models for the skills-scanner launcher.

Defines typed configuration classes that represent config.yml structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from skills_scanner.bootstrap.paths import DEFAULT_LOCAL_BUILD_DIR

# Strategy names in the default resolution order
OPTIONAL_PACKAGE_STRATEGY = "optional-package"
LOCAL_BUILD_STRATEGY = "local-build"
DEFAULT_STRATEGIES: Tuple[str, ...] = (OPTIONAL_PACKAGE_STRATEGY, LOCAL_BUILD_STRATEGY)

# Prefix shared by platform package names
DEFAULT_NAMESPACE = "skills-scanner"


@dataclass
class ResolutionConfig:
    """Binary resolution configuration.

    Controls where the launcher looks for the native binary and in
    which order the lookups run.
    """

    namespace: str = DEFAULT_NAMESPACE
    strategies: List[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    local_build_dir: str = DEFAULT_LOCAL_BUILD_DIR


@dataclass
class LauncherConfig:
    """Complete launcher configuration."""

    log_level: str = "warning"
    resolution: ResolutionConfig = field(default_factory=ResolutionConfig)

    # Tracks which files the values came from
    _config_sources: List[str] = field(default_factory=list, repr=False)
