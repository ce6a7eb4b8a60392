"""Binary resolution and dispatch for the skills-scanner launcher.

Resolution runs on every launch: the platform is mapped to an
ArtifactDescriptor and each ResolutionStrategy is tried in order.
The dispatcher then runs the binary and mirrors its exit code.
"""

from __future__ import annotations

from skills_scanner.launcher.descriptor import BINARY_NAME, ArtifactDescriptor
from skills_scanner.launcher.dispatcher import dispatch, execute, normalize_exit_code, spawn
from skills_scanner.launcher.errors import (
    BinaryNotFoundError,
    ChildLaunchError,
    LauncherError,
    UnsupportedPlatformError,
)
from skills_scanner.launcher.resolver import BinaryResolver, resolve_binary
from skills_scanner.launcher.strategies import (
    LocalBuildStrategy,
    OptionalPackageStrategy,
    ResolutionStrategy,
    build_strategies,
    find_optional_package,
)
from skills_scanner.launcher.verifier import verify

__all__ = [
    "BINARY_NAME",
    "ArtifactDescriptor",
    "dispatch",
    "execute",
    "normalize_exit_code",
    "spawn",
    "BinaryNotFoundError",
    "ChildLaunchError",
    "LauncherError",
    "UnsupportedPlatformError",
    "BinaryResolver",
    "resolve_binary",
    "LocalBuildStrategy",
    "OptionalPackageStrategy",
    "ResolutionStrategy",
    "build_strategies",
    "find_optional_package",
    "verify",
]
