"""Resolve the native skills-scanner binary for the running platform."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from skills_scanner.bootstrap.paths import LauncherPaths
from skills_scanner.bootstrap.platform import PlatformInfo, get_platform_info
from skills_scanner.config.models import LauncherConfig
from skills_scanner.core.logging import get_logger
from skills_scanner.launcher.descriptor import ArtifactDescriptor
from skills_scanner.launcher.errors import BinaryNotFoundError
from skills_scanner.launcher.strategies import (
    ResolutionStrategy,
    build_strategies,
    strategy_names,
)

LOGGER = get_logger(__name__)


class BinaryResolver:
    """Finds the binary by trying strategies in order.

    Platform support is checked before any strategy runs, so an
    unsupported host never touches the filesystem.
    """

    def __init__(
        self,
        strategies: Sequence[ResolutionStrategy],
        platform_info: Optional[PlatformInfo] = None,
        namespace: Optional[str] = None,
    ) -> None:
        self._strategies = list(strategies)
        self._platform_info = platform_info
        self._namespace = namespace

    @classmethod
    def from_config(
        cls,
        config: Optional[LauncherConfig] = None,
        platform_info: Optional[PlatformInfo] = None,
        paths: Optional[LauncherPaths] = None,
    ) -> "BinaryResolver":
        """Create a resolver with strategies built from configuration."""
        config = config or LauncherConfig()
        return cls(
            strategies=build_strategies(config.resolution, paths),
            platform_info=platform_info,
            namespace=config.resolution.namespace,
        )

    @property
    def strategies(self) -> Sequence[ResolutionStrategy]:
        return tuple(self._strategies)

    def descriptor(self) -> ArtifactDescriptor:
        """Descriptor for the platform being resolved.

        Raises:
            UnsupportedPlatformError: If the platform is not supported.
        """
        info = self._platform_info or get_platform_info()
        if self._namespace:
            return ArtifactDescriptor.from_platform(info, namespace=self._namespace)
        return ArtifactDescriptor.from_platform(info)

    def resolve(self) -> Path:
        """Resolve the binary path.

        Returns:
            Path to an existing binary.

        Raises:
            UnsupportedPlatformError: If the platform is not supported.
            BinaryNotFoundError: If no strategy located the binary.
        """
        descriptor = self.descriptor()
        LOGGER.debug(
            f"Resolving {descriptor.binary_name} for {descriptor.label} "
            f"via {', '.join(strategy_names(self._strategies)) or 'no strategies'}"
        )

        for strategy in self._strategies:
            path = strategy.locate(descriptor)
            if path is not None:
                LOGGER.info(f"Using {path} ({strategy.name})")
                return path

        raise BinaryNotFoundError(descriptor)


def resolve_binary(
    config: Optional[LauncherConfig] = None,
    platform_info: Optional[PlatformInfo] = None,
) -> Path:
    """Resolve the binary for the current platform.

    Args:
        config: Launcher configuration (default: built-in defaults).
        platform_info: Platform override (default: detected).

    Returns:
        Path to an existing binary.

    Raises:
        UnsupportedPlatformError: If the platform is not supported.
        BinaryNotFoundError: If no strategy located the binary.
    """
    return BinaryResolver.from_config(config, platform_info).resolve()
