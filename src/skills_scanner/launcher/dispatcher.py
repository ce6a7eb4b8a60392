"""Run the resolved binary and mirror its exit status."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import NoReturn, Sequence

from skills_scanner.cli.exit_codes import EXIT_LAUNCH_FAILURE, EXIT_SIGNAL_BASE
from skills_scanner.core.logging import get_logger
from skills_scanner.launcher.errors import ChildLaunchError

LOGGER = get_logger(__name__)


def spawn(binary_path: Path, args: Sequence[str]) -> int:
    """Start the binary with inherited stdio and wait for it.

    Arguments are passed as an argv list, never through a shell.

    Args:
        binary_path: Binary to run.
        args: Arguments forwarded verbatim.

    Returns:
        The child's raw return code (negative when killed by a signal).

    Raises:
        ChildLaunchError: If the process could not be started.
    """
    cmd = [str(binary_path), *args]
    LOGGER.debug(f"Running: {cmd}")

    try:
        process = subprocess.Popen(cmd, shell=False)
    except OSError as e:
        raise ChildLaunchError(binary_path, e) from e

    with process:
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                # The child got the same SIGINT; let it decide when to exit.
                LOGGER.debug("Interrupted, waiting for skills-scanner to exit")


def normalize_exit_code(returncode: int) -> int:
    """Map a raw return code to the launcher's exit code.

    Termination by signal N is reported as 128 + N.
    """
    if returncode < 0:
        return EXIT_SIGNAL_BASE + (-returncode)
    return returncode


def execute(binary_path: Path, args: Sequence[str]) -> int:
    """Run the binary and return the exit code the launcher should use."""
    try:
        returncode = spawn(binary_path, args)
    except ChildLaunchError as e:
        LOGGER.error(str(e))
        return EXIT_LAUNCH_FAILURE

    if returncode < 0:
        LOGGER.warning(f"skills-scanner was terminated by signal {-returncode}")
    return normalize_exit_code(returncode)


def dispatch(binary_path: Path, args: Sequence[str]) -> NoReturn:
    """Run the binary and exit the current process with its exit code."""
    raise SystemExit(execute(binary_path, args))
