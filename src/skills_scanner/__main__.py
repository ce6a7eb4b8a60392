"""Allow ``python -m skills_scanner`` to behave like the console script."""

from __future__ import annotations

from skills_scanner.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
