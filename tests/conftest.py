"""Shared fixtures for skills-scanner tests."""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Callable, Iterator

import pytest

from skills_scanner.bootstrap.paths import SKILLS_SCANNER_HOME_ENV
from skills_scanner.core.logging import LOG_LEVEL_ENV, ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the launcher home at an empty temp directory."""
    home = tmp_path / ".skills-scanner"
    monkeypatch.setenv(SKILLS_SCANNER_HOME_ENV, str(home))
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers bound to captured streams once a test finishes."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_binary() -> Callable[[Path], Path]:
    """Create an executable placeholder binary at the given path."""

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make


@pytest.fixture
def write_config(isolated_home: Path) -> Callable[[str], Path]:
    """Write config.yml into the isolated home."""

    def _write(content: str) -> Path:
        isolated_home.mkdir(parents=True, exist_ok=True)
        path = isolated_home / "config.yml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write

