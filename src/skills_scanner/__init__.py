"""skills-scanner launcher.

Resolves the native skills-scanner binary for the running platform and
hands control to it.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
