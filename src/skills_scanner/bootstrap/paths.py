"""Path management for the skills-scanner launcher.

Handles the launcher home directory (~/.skills-scanner) and the local
development build directory used when no platform package is installed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".skills-scanner"

# Environment variable to override home directory
SKILLS_SCANNER_HOME_ENV = "SKILLS_SCANNER_HOME"

# Relative to the launcher root
DEFAULT_LOCAL_BUILD_DIR = "target/release"


def get_skills_scanner_home() -> Path:
    """Get the launcher home directory path.

    Resolution order:
    1. SKILLS_SCANNER_HOME environment variable (if set)
    2. ~/.skills-scanner (default)

    Returns:
        Path to the launcher home directory.
    """
    env_home = os.environ.get(SKILLS_SCANNER_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME


def get_launcher_root() -> Path:
    """Get the root of the launcher checkout.

    Structure: src/skills_scanner/bootstrap/paths.py -> ../../../
    For an installed package this points next to site-packages, where no
    local build exists, so the local fallback simply never matches.
    """
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class LauncherPaths:
    """Paths used by the launcher.

    Directory structure:
        <launcher root>/
            target/release/skills-scanner   - local development build
        ~/.skills-scanner/
            config.yml                      - launcher configuration
    """

    home: Path
    root: Path

    _CONFIG_FILE: ClassVar[str] = "config.yml"

    @classmethod
    def default(cls) -> "LauncherPaths":
        """Create paths from the default home and the checkout root."""
        return cls(home=get_skills_scanner_home(), root=get_launcher_root())

    @property
    def config_file(self) -> Path:
        """Global launcher configuration file."""
        return self.home / self._CONFIG_FILE

    def local_build_dir(self, relative: str = DEFAULT_LOCAL_BUILD_DIR) -> Path:
        """Directory holding a locally built binary.

        Args:
            relative: Build directory relative to the launcher root.

        Returns:
            Absolute build directory path.
        """
        return self.root / relative
