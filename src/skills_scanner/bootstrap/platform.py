"""Platform detection for skills-scanner binary resolution.

Maps the host OS and CPU identifiers onto the small set of platforms for
which native binaries are published. Mapping is total: identifiers outside
the tables map to an explicit ``UNSUPPORTED`` member instead of raising.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class PlatformKey(str, Enum):
    """Operating systems with published binaries."""

    WIN32 = "win32"
    DARWIN = "darwin"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"


class ArchKey(str, Enum):
    """CPU architectures with published binaries."""

    X64 = "x64"
    ARM64 = "arm64"
    UNSUPPORTED = "unsupported"


# Keyed by sys.platform values
PLATFORM_TABLE: Mapping[str, PlatformKey] = MappingProxyType({
    "win32": PlatformKey.WIN32,
    "darwin": PlatformKey.DARWIN,
    "linux": PlatformKey.LINUX,
})

# Keyed by lower-cased platform.machine() values
ARCH_TABLE: Mapping[str, ArchKey] = MappingProxyType({
    "x86_64": ArchKey.X64,
    "amd64": ArchKey.X64,
    "x64": ArchKey.X64,
    "aarch64": ArchKey.ARM64,
    "arm64": ArchKey.ARM64,
})


def map_platform(os_name: str) -> PlatformKey:
    """Map a ``sys.platform`` value to a PlatformKey."""
    return PLATFORM_TABLE.get(os_name.lower(), PlatformKey.UNSUPPORTED)


def map_arch(machine: str) -> ArchKey:
    """Map a ``platform.machine()`` value to an ArchKey."""
    return ARCH_TABLE.get(machine.lower(), ArchKey.UNSUPPORTED)


@dataclass(frozen=True)
class PlatformInfo:
    """Host identifiers and their mapped keys.

    ``os`` and ``arch`` keep the raw identifiers for diagnostics.
    """

    os: str
    arch: str
    platform_key: PlatformKey = field(init=False)
    arch_key: ArchKey = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "platform_key", map_platform(self.os))
        object.__setattr__(self, "arch_key", map_arch(self.arch))

    @property
    def is_supported(self) -> bool:
        return (
            self.platform_key is not PlatformKey.UNSUPPORTED
            and self.arch_key is not ArchKey.UNSUPPORTED
        )

    @property
    def label(self) -> str:
        """Raw ``<os>-<arch>`` pair as reported by the host."""
        return f"{self.os}-{self.arch}"


def get_platform_info(
    os_name: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformInfo:
    """Detect the current platform.

    Args:
        os_name: Override for ``sys.platform``.
        machine: Override for ``platform.machine()``.

    Returns:
        PlatformInfo for the host (or the given overrides).
    """
    return PlatformInfo(
        os=os_name if os_name is not None else sys.platform,
        arch=machine if machine is not None else platform.machine(),
    )
