"""Tests for skills_scanner.launcher.verifier."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from skills_scanner.bootstrap.platform import PlatformInfo
from skills_scanner.launcher.verifier import verify


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def _text(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestVerify:
    """Tests for verify."""

    def test_package_installed(self, tmp_path: Path) -> None:
        out, err = _console(), _console()
        finder = MagicMock(return_value=tmp_path)

        code = verify(
            platform_info=PlatformInfo(os="linux", arch="x86_64"),
            console=out,
            err_console=err,
            finder=finder,
        )

        assert code == 0
        assert "Binary installed for linux-x64" in _text(out)
        assert _text(err) == ""
        finder.assert_called_once_with("skills_scanner_linux_x64")

    def test_package_missing_warns_and_exits_0(self) -> None:
        out, err = _console(), _console()

        code = verify(
            platform_info=PlatformInfo(os="darwin", arch="arm64"),
            console=out,
            err_console=err,
            finder=lambda name: None,
        )

        assert code == 0
        assert "skills-scanner/darwin-arm64 not installed" in _text(err)
        assert "pip install skills-scanner-darwin-arm64" in _text(err)
        assert _text(out) == ""

    @pytest.mark.parametrize(
        "info",
        [
            PlatformInfo(os="freebsd13", arch="x86_64"),
            PlatformInfo(os="linux", arch="s390x"),
        ],
    )
    def test_unsupported_platform_warns_and_exits_0(self, info: PlatformInfo) -> None:
        err = _console()
        finder = MagicMock()

        code = verify(platform_info=info, console=_console(), err_console=err, finder=finder)

        assert code == 0
        assert f"Unsupported platform {info.label}" in _text(err)
        assert "build from source" in _text(err)
        finder.assert_not_called()

    def test_unexpected_error_still_exits_0(self) -> None:
        finder = MagicMock(side_effect=RuntimeError("boom"))

        code = verify(
            platform_info=PlatformInfo(os="linux", arch="aarch64"),
            console=_console(),
            err_console=_console(),
            finder=finder,
        )

        assert code == 0

    def test_custom_namespace(self) -> None:
        finder = MagicMock(return_value=None)

        verify(
            platform_info=PlatformInfo(os="win32", arch="AMD64"),
            console=_console(),
            err_console=_console(),
            finder=finder,
            namespace="acme",
        )

        finder.assert_called_once_with("acme_win32_x64")

    def test_default_consoles_use_std_streams(self, capsys: pytest.CaptureFixture) -> None:
        code = verify(
            platform_info=PlatformInfo(os="linux", arch="x86_64"),
            finder=lambda name: None,
        )

        captured = capsys.readouterr()
        assert code == 0
        assert "not installed" in captured.err
