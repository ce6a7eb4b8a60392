"""Launcher runner: resolve the native binary and hand over to it."""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, List, Optional

from skills_scanner.bootstrap.platform import PlatformInfo
from skills_scanner.config import ConfigError, LauncherConfig, load_config
from skills_scanner.cli.exit_codes import EXIT_LAUNCH_FAILURE
from skills_scanner.core.logging import configure_logging, get_logger
from skills_scanner.launcher import dispatcher
from skills_scanner.launcher.errors import LauncherError
from skills_scanner.launcher.resolver import BinaryResolver
from skills_scanner.launcher.verifier import verify

LOGGER = get_logger(__name__)


def get_version() -> str:
    try:
        return version("skills-scanner")
    except PackageNotFoundError:
        # Fallback for source checkouts without installed metadata.
        from skills_scanner import __version__

        return __version__


def load_launcher_config() -> LauncherConfig:
    """Load configuration and configure logging from it.

    A broken config file is reported and replaced by defaults; it never
    stops the launcher.
    """
    # Logging must work while the config itself is being read.
    configure_logging()
    try:
        config = load_config()
    except ConfigError as e:
        LOGGER.warning(f"{e}; using default configuration")
        config = LauncherConfig()
    configure_logging(config.log_level)
    return config


class LauncherRunner:
    """Runs one launcher invocation.

    The launcher has no options of its own; every argument belongs to
    the native binary.
    """

    def __init__(self, platform_info: Optional[PlatformInfo] = None) -> None:
        self._platform_info = platform_info

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Resolve the binary and run it.

        Args:
            argv: Arguments for the binary (defaults to sys.argv[1:]).

        Returns:
            The binary's exit code, or EXIT_LAUNCH_FAILURE.
        """
        args: List[str] = list(sys.argv[1:] if argv is None else argv)

        config = load_launcher_config()
        LOGGER.debug(f"skills-scanner launcher {get_version()}")

        try:
            resolver = BinaryResolver.from_config(config, self._platform_info)
            binary = resolver.resolve()
        except LauncherError as e:
            LOGGER.error(str(e))
            return EXIT_LAUNCH_FAILURE

        return dispatcher.execute(binary, args)

    def verify(self) -> int:
        """Run the install check; always returns EXIT_SUCCESS."""
        namespace: Optional[str] = None
        try:
            namespace = load_launcher_config().resolution.namespace
        except Exception as e:
            LOGGER.warning(f"Could not load configuration: {e}")
        return verify(platform_info=self._platform_info, namespace=namespace)
