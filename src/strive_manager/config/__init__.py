"""Configuration module: fixed paths, data models, and path helpers.

Submodules:
    paths: GamePaths with Steam candidate locations and layout constants
    schema: Data classes (Platform, ProbeEnvironment, DiscoveryState, MenuItem)
    path_validator: Directory checks and manual path normalization

There is no configuration file; everything here is fixed at import time.
"""

from .paths import GamePaths
from .schema import DiscoveryState, MenuItem, Platform, ProbeEnvironment
from .path_validator import is_existing_directory, normalize_manual_path

__all__ = [
    "GamePaths",
    "DiscoveryState",
    "MenuItem",
    "Platform",
    "ProbeEnvironment",
    "is_existing_directory",
    "normalize_manual_path",
]
