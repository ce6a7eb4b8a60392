"""Exit codes for the skills-scanner launcher.

- 0: Success (the binary exited 0)
- 1: Launch failure (unsupported platform, binary not found, could not start)
- 128 + N: The binary was terminated by signal N
- Anything else is the binary's own exit code, passed through unchanged.
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_LAUNCH_FAILURE = 1
EXIT_SIGNAL_BASE = 128
