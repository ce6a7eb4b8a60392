"""skills-scanner CLI package.

Console-script entry points for the launcher and the install check.
"""

from __future__ import annotations

from typing import Iterable, Optional

from skills_scanner.cli.exit_codes import (
    EXIT_LAUNCH_FAILURE,
    EXIT_SIGNAL_BASE,
    EXIT_SUCCESS,
)
from skills_scanner.cli.runner import LauncherRunner, get_version


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Launcher entrypoint.

    Returns an exit code suitable for use as a console script.

    Args:
        argv: Arguments forwarded to the binary (defaults to sys.argv[1:]).

    Returns:
        Exit code.
    """
    runner = LauncherRunner()
    return runner.run(argv)


def verify_main() -> int:
    """Install-check entrypoint; always returns EXIT_SUCCESS."""
    runner = LauncherRunner()
    return runner.verify()


__all__ = [
    "main",
    "verify_main",
    "get_version",
    "LauncherRunner",
    "EXIT_SUCCESS",
    "EXIT_LAUNCH_FAILURE",
    "EXIT_SIGNAL_BASE",
]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
