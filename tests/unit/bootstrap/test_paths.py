"""Tests for skills_scanner.bootstrap.paths."""

from __future__ import annotations

from pathlib import Path

import pytest

import skills_scanner
from skills_scanner.bootstrap.paths import (
    DEFAULT_HOME_DIR_NAME,
    SKILLS_SCANNER_HOME_ENV,
    LauncherPaths,
    get_launcher_root,
    get_skills_scanner_home,
)


class TestGetSkillsScannerHome:
    """Tests for get_skills_scanner_home."""

    def test_uses_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(SKILLS_SCANNER_HOME_ENV, str(tmp_path / "custom"))
        assert get_skills_scanner_home() == tmp_path / "custom"

    def test_defaults_to_user_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(SKILLS_SCANNER_HOME_ENV, raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert get_skills_scanner_home() == tmp_path / DEFAULT_HOME_DIR_NAME


class TestLauncherRoot:
    """Tests for get_launcher_root."""

    def test_root_is_three_levels_above_package(self) -> None:
        package_dir = Path(skills_scanner.__file__).resolve().parent
        assert get_launcher_root() == package_dir.parent.parent

    def test_source_checkout_root_holds_pyproject(self) -> None:
        root = get_launcher_root()
        if (root / "src" / "skills_scanner").is_dir():
            assert (root / "pyproject.toml").exists()


class TestLauncherPaths:
    """Tests for LauncherPaths."""

    def test_config_file(self, tmp_path: Path) -> None:
        paths = LauncherPaths(home=tmp_path / "home", root=tmp_path / "root")
        assert paths.config_file == tmp_path / "home" / "config.yml"

    def test_default_local_build_dir(self, tmp_path: Path) -> None:
        paths = LauncherPaths(home=tmp_path, root=tmp_path / "root")
        assert paths.local_build_dir() == tmp_path / "root" / "target" / "release"

    def test_custom_local_build_dir(self, tmp_path: Path) -> None:
        paths = LauncherPaths(home=tmp_path, root=tmp_path / "root")
        assert paths.local_build_dir("build/out") == tmp_path / "root" / "build" / "out"

    def test_default_uses_env_home(self, isolated_home: Path) -> None:
        paths = LauncherPaths.default()
        assert paths.home == isolated_home
        assert paths.root == get_launcher_root()
