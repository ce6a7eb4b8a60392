"""Binary resolution strategies.

Each strategy looks in one place for the binary described by an
ArtifactDescriptor and returns its path, or None when it is not there.
BinaryResolver tries strategies in order and stops at the first hit.
"""

from __future__ import annotations

import importlib.util
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from skills_scanner.bootstrap.paths import LauncherPaths
from skills_scanner.bootstrap.validation import ToolStatus, validate_binary
from skills_scanner.config.models import (
    LOCAL_BUILD_STRATEGY,
    OPTIONAL_PACKAGE_STRATEGY,
    ResolutionConfig,
)
from skills_scanner.core.logging import get_logger
from skills_scanner.launcher.descriptor import ArtifactDescriptor

LOGGER = get_logger(__name__)

PackageFinder = Callable[[str], Optional[Path]]


def find_optional_package(module_name: str) -> Optional[Path]:
    """Locate the installed directory of an importable package.

    Lookup failures are reported as absence rather than raised; a missing
    or broken platform package is an expected state.

    Args:
        module_name: Importable package name, e.g. ``skills_scanner_linux_x64``.

    Returns:
        Package directory, or None if the package is not installed.
    """
    try:
        spec = importlib.util.find_spec(module_name)
    except (ImportError, ValueError) as e:
        LOGGER.debug(f"Lookup of {module_name} failed: {e}")
        return None

    if spec is None:
        return None

    if spec.submodule_search_locations:
        return Path(list(spec.submodule_search_locations)[0])
    if spec.origin:
        return Path(spec.origin).parent
    return None


def _check_candidate(strategy: str, path: Path) -> Optional[Path]:
    status = validate_binary(path)
    if status == ToolStatus.MISSING:
        LOGGER.debug(f"{strategy}: no binary at {path}")
        return None
    if status == ToolStatus.NOT_EXECUTABLE:
        LOGGER.warning(f"{strategy}: {path} exists but is not executable")
    else:
        LOGGER.debug(f"{strategy}: found binary at {path}")
    return path


class ResolutionStrategy(ABC):
    """Abstract base class for binary resolution strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier used in configuration."""

    @abstractmethod
    def locate(self, descriptor: ArtifactDescriptor) -> Optional[Path]:
        """Return the binary path if this strategy finds one.

        Args:
            descriptor: Platform package and binary names to look for.

        Returns:
            Existing binary path, or None.
        """


class OptionalPackageStrategy(ResolutionStrategy):
    """Binary shipped in the platform package: ``<package>/bin/<binary>``."""

    def __init__(self, finder: PackageFinder = find_optional_package) -> None:
        self._finder = finder

    @property
    def name(self) -> str:
        return OPTIONAL_PACKAGE_STRATEGY

    def locate(self, descriptor: ArtifactDescriptor) -> Optional[Path]:
        package_dir = self._finder(descriptor.module_name)
        if package_dir is None:
            LOGGER.debug(f"{self.name}: {descriptor.package_name} is not installed")
            return None
        return _check_candidate(self.name, package_dir / "bin" / descriptor.binary_name)


class LocalBuildStrategy(ResolutionStrategy):
    """Development build: ``<launcher root>/target/release/<binary>``."""

    def __init__(self, build_dir: Path) -> None:
        self._build_dir = build_dir

    @property
    def name(self) -> str:
        return LOCAL_BUILD_STRATEGY

    @property
    def build_dir(self) -> Path:
        return self._build_dir

    def locate(self, descriptor: ArtifactDescriptor) -> Optional[Path]:
        return _check_candidate(self.name, self._build_dir / descriptor.binary_name)


def _optional_package(paths: LauncherPaths, config: ResolutionConfig) -> ResolutionStrategy:
    return OptionalPackageStrategy(finder=find_optional_package)


def _local_build(paths: LauncherPaths, config: ResolutionConfig) -> ResolutionStrategy:
    return LocalBuildStrategy(paths.local_build_dir(config.local_build_dir))


STRATEGY_FACTORIES: Dict[
    str, Callable[[LauncherPaths, ResolutionConfig], ResolutionStrategy]
] = {
    OPTIONAL_PACKAGE_STRATEGY: _optional_package,
    LOCAL_BUILD_STRATEGY: _local_build,
}


def build_strategies(
    config: Optional[ResolutionConfig] = None,
    paths: Optional[LauncherPaths] = None,
) -> List[ResolutionStrategy]:
    """Instantiate strategies in the configured order.

    Args:
        config: Resolution settings (default: built-in defaults).
        paths: Launcher paths (default: LauncherPaths.default()).

    Returns:
        Ordered list of strategies.
    """
    config = config or ResolutionConfig()
    paths = paths or LauncherPaths.default()

    strategies: List[ResolutionStrategy] = []
    for name in config.strategies:
        factory = STRATEGY_FACTORIES.get(name)
        if factory is None:
            LOGGER.warning(f"Unknown resolution strategy '{name}', skipping")
            continue
        strategies.append(factory(paths, config))
    return strategies


def strategy_names(strategies: Sequence[ResolutionStrategy]) -> List[str]:
    return [strategy.name for strategy in strategies]
