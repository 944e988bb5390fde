"""Tests for the application data directory and start-up without a home."""

from __future__ import annotations

import importlib
import os
import sys
import tempfile
from pathlib import Path

import pytest

from strive_manager.config import paths as paths_module
from strive_manager.config.paths import GamePaths
from strive_manager.config.schema import Platform, ProbeEnvironment
from strive_manager.core.discovery import DiscoveryController


def _no_home(*args, **kwargs):
    raise RuntimeError("Could not determine home directory.")


@pytest.fixture
def homeless(monkeypatch: pytest.MonkeyPatch) -> None:
    """Simulate a user with neither HOME nor a passwd entry."""
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setattr(Path, "home", _no_home)
    monkeypatch.setattr(os.path, "expanduser", lambda path: path)
    monkeypatch.setattr(sys, "platform", "linux")


class TestConfigDir:
    def test_linux_uses_xdg_style_folder(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert GamePaths.config_dir() == tmp_path / ".config" / "strive-mod-manager"

    def test_windows_uses_appdata(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setenv("APPDATA", str(tmp_path))
        assert GamePaths.config_dir() == tmp_path / "StriveModManager"

    def test_log_file_inside_config_dir(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("HOME", str(tmp_path))
        assert GamePaths.log_file().parent == GamePaths.config_dir()

    def test_no_home_falls_back_to_temp(self, homeless: None) -> None:
        assert GamePaths.config_dir() == Path(tempfile.gettempdir()) / "strive-mod-manager"


class TestStartupWithoutHome:
    def test_paths_module_imports(self, homeless: None) -> None:
        reloaded = importlib.reload(paths_module)
        assert reloaded.GamePaths.NOT_FOUND == "Not found"

    def test_discovery_reports_not_found(self, homeless: None) -> None:
        importlib.reload(paths_module)
        controller = DiscoveryController(ProbeEnvironment(Platform.LINUX, {}))

        controller.run_automatic_discovery()

        assert controller.resolved
        assert not controller.found
        assert controller.path == "Not found"
        assert controller.awaiting_confirmation
