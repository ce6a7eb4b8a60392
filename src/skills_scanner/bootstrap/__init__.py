"""
Bootstrap module for skills-scanner binary resolution.

This module handles:
- Platform detection (OS + architecture)
- Launcher paths (home directory, local build directory)
- Binary validation utilities
"""

from skills_scanner.bootstrap.platform import (
    ArchKey,
    PlatformInfo,
    PlatformKey,
    get_platform_info,
)
from skills_scanner.bootstrap.paths import (
    LauncherPaths,
    get_launcher_root,
    get_skills_scanner_home,
)
from skills_scanner.bootstrap.validation import ToolStatus, validate_binary

__all__ = [
    "ArchKey",
    "PlatformInfo",
    "PlatformKey",
    "get_platform_info",
    "LauncherPaths",
    "get_launcher_root",
    "get_skills_scanner_home",
    "ToolStatus",
    "validate_binary",
]
