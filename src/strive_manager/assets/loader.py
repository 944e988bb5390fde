"""Locate bundled image assets in development and packaged builds"""

import sys
from pathlib import Path


def get_asset_path(relative_path: str) -> Path:
    """Resolve a file shipped in the assets directory.

    PyInstaller unpacks bundled data under ``sys._MEIPASS``; otherwise the
    assets sit next to this module.

    Args:
        relative_path: Path relative to the assets directory (e.g., "brisket.jpg")

    Returns:
        Absolute path to the asset file (which may not exist)
    """
    if getattr(sys, 'frozen', False):
        base_path = Path(sys._MEIPASS) / "strive_manager" / "assets"
    else:
        base_path = Path(__file__).parent

    return base_path / relative_path
