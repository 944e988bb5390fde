"""Shared test helpers for building fake game installs on disk."""

from __future__ import annotations

from pathlib import Path

PAKS_PARTS = ("RED", "Content", "Paks")
GAME_DIR = ("steamapps", "common", "GUILTY GEAR STRIVE")


def create_paks_dir(game_root: Path) -> Path:
    """Create ``<game_root>/RED/Content/Paks`` and return it."""
    paks = game_root.joinpath(*PAKS_PARTS)
    paks.mkdir(parents=True, exist_ok=True)
    return paks


def create_steam_install(steam_root: Path) -> Path:
    """Create a Steam library containing GUILTY GEAR STRIVE and return its Paks dir."""
    return create_paks_dir(steam_root.joinpath(*GAME_DIR))


def as_candidate(path: Path) -> str:
    """Format a directory the way candidate paths are written (trailing slash)."""
    return f"{path}/"
