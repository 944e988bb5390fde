"""Tests for default candidate paths and the probe loop."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from strive_manager.config.schema import Platform, ProbeEnvironment
from strive_manager.core.path_prober import candidate_paths, probe, probe_host

from tests.helpers import as_candidate, create_steam_install


# ---------------------------------------------------------------------------
# candidate_paths()
# ---------------------------------------------------------------------------


class TestCandidatePaths:
    """Per-platform candidate construction."""

    def test_windows_candidates(self) -> None:
        assert candidate_paths(Platform.WINDOWS, {}) == (
            "C:\\Program Files (x86)\\Steam\\steamapps\\common\\GUILTY GEAR STRIVE\\RED\\Content\\Paks\\",
            "C:\\Program Files\\Steam\\steamapps\\common\\GUILTY GEAR STRIVE\\RED\\Content\\Paks\\",
        )

    def test_windows_ignores_home(self) -> None:
        with_home = candidate_paths(Platform.WINDOWS, {"HOME": "/home/sol"})
        assert with_home == candidate_paths(Platform.WINDOWS, {})

    def test_macos_candidates(self) -> None:
        assert candidate_paths(Platform.MACOS, {"HOME": "/Users/ky"}) == (
            "/Applications/Steam.app/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/",
            "/Users/ky/Library/Application Support/Steam/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/",
        )

    def test_linux_candidates(self) -> None:
        assert candidate_paths(Platform.LINUX, {"HOME": "/home/may"}) == (
            "/home/may/.local/share/Steam/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/",
            "/home/may/.var/app/com.valvesoftware.Steam/.local/share/Steam/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/",
        )

    def test_other_platform_is_empty(self) -> None:
        assert candidate_paths(Platform.OTHER, {"HOME": "/home/may"}) == ()

    @pytest.mark.parametrize("platform", [Platform.MACOS, Platform.LINUX])
    def test_missing_home_falls_back_to_empty(self, platform: Platform) -> None:
        """Unset HOME gives well-formed paths rooted at the suffix."""
        paths = candidate_paths(platform, {})
        assert len(paths) == 2
        assert all(p.startswith("/") for p in paths)
        assert paths[-1].startswith(("/Library/", "/.var/"))

    @pytest.mark.parametrize(
        "platform, expected",
        [
            (Platform.WINDOWS, 2),
            (Platform.MACOS, 2),
            (Platform.LINUX, 2),
            (Platform.OTHER, 0),
        ],
    )
    def test_candidate_count(self, platform: Platform, expected: int) -> None:
        assert len(candidate_paths(platform, {"HOME": "/h"})) == expected

    def test_sequence_is_restartable(self) -> None:
        paths = candidate_paths(Platform.LINUX, {"HOME": "/h"})
        assert list(paths) == list(paths)


# ---------------------------------------------------------------------------
# probe()
# ---------------------------------------------------------------------------


class TestProbe:
    """Probe loop with injected and real directory checks."""

    def test_first_existing_wins(self) -> None:
        existing = {"/a/", "/b/"}
        assert probe(["/a/", "/b/"], is_dir=existing.__contains__) == "/a/"

    def test_skips_missing(self) -> None:
        existing = {"/b/"}
        assert probe(["/a/", "/b/"], is_dir=existing.__contains__) == "/b/"

    def test_empty_sequence(self) -> None:
        assert probe([], is_dir=lambda path: True) is None

    def test_nothing_exists(self) -> None:
        assert probe(["/a/", "/b/"], is_dir=lambda path: False) is None

    def test_stops_at_first_match(self) -> None:
        checked: list[str] = []

        def is_dir(path: str) -> bool:
            checked.append(path)
            return True

        probe(["/a/", "/b/"], is_dir=is_dir)
        assert checked == ["/a/"]

    def test_real_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "paks"
        target.mkdir()
        assert probe([str(tmp_path / "missing"), str(target)]) == str(target)

    def test_regular_file_is_not_a_match(self, tmp_path: Path) -> None:
        target = tmp_path / "paks"
        target.write_text("not a directory")
        assert probe([str(target)]) is None

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_dangling_symlink_is_not_a_match(self, tmp_path: Path) -> None:
        link = tmp_path / "link"
        try:
            link.symlink_to(tmp_path / "gone", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")
        assert probe([str(link)]) is None


# ---------------------------------------------------------------------------
# probe_host()
# ---------------------------------------------------------------------------


class TestProbeHost:
    """Candidate construction plus probing for a whole environment."""

    def test_linux_flatpak_install(self, tmp_path: Path) -> None:
        flatpak_steam = tmp_path / ".var" / "app" / "com.valvesoftware.Steam" / ".local" / "share" / "Steam"
        paks = create_steam_install(flatpak_steam)
        env = ProbeEnvironment(Platform.LINUX, {"HOME": str(tmp_path)})
        assert probe_host(env) == as_candidate(paks)

    def test_linux_native_preferred_over_flatpak(self, tmp_path: Path) -> None:
        native = create_steam_install(tmp_path / ".local" / "share" / "Steam")
        create_steam_install(tmp_path / ".var" / "app" / "com.valvesoftware.Steam" / ".local" / "share" / "Steam")
        env = ProbeEnvironment(Platform.LINUX, {"HOME": str(tmp_path)})
        assert probe_host(env) == as_candidate(native)

    def test_empty_home(self, tmp_path: Path) -> None:
        env = ProbeEnvironment(Platform.LINUX, {"HOME": str(tmp_path)})
        assert probe_host(env) is None

    def test_other_platform(self) -> None:
        assert probe_host(ProbeEnvironment(Platform.OTHER), is_dir=lambda path: True) is None


class TestPlatform:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.WINDOWS),
            ("darwin", Platform.MACOS),
            ("linux", Platform.LINUX),
            ("freebsd14", Platform.OTHER),
        ],
    )
    def test_from_sys_platform(self, name: str, expected: Platform) -> None:
        assert Platform.from_sys_platform(name) is expected

    def test_current_follows_sys_platform(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "platform", "darwin")
        assert Platform.current() is Platform.MACOS

    def test_from_host_captures_platform_and_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("HOME", "/home/sol")

        environment = ProbeEnvironment.from_host()

        assert environment.platform is Platform.LINUX
        assert environment.env["HOME"] == "/home/sol"
