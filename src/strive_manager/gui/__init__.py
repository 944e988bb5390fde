"""GUI module using CustomTkinter for a modern interface.

This module provides all user interface components for the application.

Components:
    MainWindow: Main application window with the feature list and logo sidebar
    ResultDialog: Discovery result dialog (confirm, reject, manual entry)

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
    widgets: Reusable widget components (PathSelector)
"""

from .main_window import MainWindow
from .result_dialog import ResultDialog

__all__ = [
    "MainWindow",
    "ResultDialog",
]
