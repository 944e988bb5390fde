"""Reusable GUI widgets for the application.

Widgets:
    PathSelector: A compound widget combining a label, text entry, and browse
                  button for entering the game folder manually.
"""

from .path_selector import PathSelector

__all__ = [
    "PathSelector",
]
