"""Install-time check that the platform package was installed.

Advisory only: every outcome, including unexpected errors, returns 0 so
that running it from an install step can never fail the install.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from skills_scanner.bootstrap.platform import PlatformInfo, get_platform_info
from skills_scanner.cli.exit_codes import EXIT_SUCCESS
from skills_scanner.core.logging import get_logger
from skills_scanner.launcher.descriptor import ArtifactDescriptor
from skills_scanner.launcher.strategies import PackageFinder, find_optional_package

LOGGER = get_logger(__name__)


def verify(
    platform_info: Optional[PlatformInfo] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
    finder: PackageFinder = find_optional_package,
    namespace: Optional[str] = None,
) -> int:
    """Report whether the platform package for this host is installed.

    Args:
        platform_info: Platform override (default: detected).
        console: Console for the success message (default: stdout).
        err_console: Console for warnings (default: stderr).
        finder: Package lookup used for the existence check.
        namespace: Platform package namespace (default: skills-scanner).

    Returns:
        Always EXIT_SUCCESS.
    """
    out = console or Console()
    err = err_console or Console(stderr=True)

    try:
        info = platform_info or get_platform_info()

        if not info.is_supported:
            err.print()
            err.print(
                f"⚠️  skills-scanner: Unsupported platform {info.label}",
                style="yellow",
                markup=False,
                soft_wrap=True,
            )
            err.print("   You may need to build from source.", markup=False, soft_wrap=True)
            err.print()
            return EXIT_SUCCESS

        if namespace:
            descriptor = ArtifactDescriptor.from_platform(info, namespace=namespace)
        else:
            descriptor = ArtifactDescriptor.from_platform(info)

        if finder(descriptor.module_name) is not None:
            out.print(
                f"✓ skills-scanner: Binary installed for {descriptor.label}",
                style="green",
                markup=False,
                soft_wrap=True,
            )
            return EXIT_SUCCESS

        err.print()
        err.print(
            f"⚠️  skills-scanner: Optional dependency {descriptor.package_name} not installed.",
            style="yellow",
            markup=False,
            soft_wrap=True,
        )
        err.print(
            "   This is expected if platform packages were skipped during install; "
            f"run 'pip install {descriptor.distribution_name}' to add it.",
            markup=False,
            soft_wrap=True,
        )
        err.print()
    except Exception as e:
        LOGGER.warning(f"Install check failed: {e}")

    return EXIT_SUCCESS
