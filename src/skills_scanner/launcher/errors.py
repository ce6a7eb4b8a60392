"""Errors raised while resolving or launching the native binary."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skills_scanner.launcher.descriptor import ArtifactDescriptor


class LauncherError(Exception):
    """Base class for launcher failures."""

    pass


class UnsupportedPlatformError(LauncherError):
    """No binary is published for the host OS/architecture pair."""

    def __init__(self, os_name: str, arch: str) -> None:
        self.os_name = os_name
        self.arch = arch
        super().__init__(f"Unsupported platform: {os_name}-{arch}")


class BinaryNotFoundError(LauncherError):
    """Supported platform, but no strategy located the binary."""

    def __init__(self, descriptor: "ArtifactDescriptor") -> None:
        self.descriptor = descriptor
        super().__init__(
            f"Could not find binary for {descriptor.label}. "
            f"Please ensure {descriptor.package_name} is installed "
            f"(pip install {descriptor.distribution_name})."
        )


class ChildLaunchError(LauncherError):
    """The resolved binary could not be started."""

    def __init__(self, binary_path: Path, cause: OSError) -> None:
        self.binary_path = binary_path
        self.cause = cause
        super().__init__(f"Failed to start skills-scanner ({binary_path}): {cause}")
