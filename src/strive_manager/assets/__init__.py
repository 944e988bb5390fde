"""Asset loading utilities.

Works in both development and packaged (PyInstaller) modes.

Submodules:
    loader: get_asset_path() function for resolving asset paths

Asset Directory Structure:
    assets/
        brisket.jpg   - Optional sidebar logo; "Image not found" is shown without it
"""

from .loader import get_asset_path

__all__ = [
    "get_asset_path",
]
