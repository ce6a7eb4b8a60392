"""Names derived from a platform/architecture pair."""

from __future__ import annotations

from dataclasses import dataclass

from skills_scanner.bootstrap.platform import ArchKey, PlatformInfo, PlatformKey
from skills_scanner.config.models import DEFAULT_NAMESPACE
from skills_scanner.launcher.errors import UnsupportedPlatformError

BINARY_NAME = "skills-scanner"


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Identifies the platform package and binary for one platform pair.

    Example for linux/x64 with the default namespace:
        package_name       skills-scanner/linux-x64
        distribution_name  skills-scanner-linux-x64
        module_name        skills_scanner_linux_x64
        binary_name        skills-scanner
    """

    platform: PlatformKey
    arch: ArchKey
    namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        if self.platform is PlatformKey.UNSUPPORTED or self.arch is ArchKey.UNSUPPORTED:
            raise UnsupportedPlatformError(self.platform.value, self.arch.value)

    @classmethod
    def from_platform(
        cls,
        info: PlatformInfo,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> "ArtifactDescriptor":
        """Build a descriptor, failing on unsupported hosts.

        Raises:
            UnsupportedPlatformError: If the OS or architecture is not supported.
        """
        if not info.is_supported:
            raise UnsupportedPlatformError(info.os, info.arch)
        return cls(platform=info.platform_key, arch=info.arch_key, namespace=namespace)

    @property
    def label(self) -> str:
        return f"{self.platform.value}-{self.arch.value}"

    @property
    def package_name(self) -> str:
        return f"{self.namespace}/{self.label}"

    @property
    def distribution_name(self) -> str:
        return f"{self.namespace}-{self.label}"

    @property
    def module_name(self) -> str:
        return self.distribution_name.replace("-", "_").replace(".", "_")

    @property
    def binary_name(self) -> str:
        if self.platform is PlatformKey.WIN32:
            return f"{BINARY_NAME}.exe"
        return BINARY_NAME
