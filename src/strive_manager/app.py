"""Main application entry point and orchestrator"""

import sys

import customtkinter as ctk

from .core.discovery import DiscoveryController
from .gui.main_window import MainWindow
from .logging_config import setup_logging
from . import __version__


class StriveManagerApp:
    """Main application orchestrator.

    Runs installation discovery once at startup and hands the controller to
    the main window.
    """

    def __init__(self, controller: DiscoveryController | None = None):
        self.controller = controller or DiscoveryController()
        self.main_window: MainWindow | None = None

    def run(self):
        """Run the application."""
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.controller.run_automatic_discovery()

        self.main_window = MainWindow(self.controller)
        self.main_window.mainloop()


def main():
    """Application entry point."""
    # Initialize logging first
    logger = setup_logging(debug="--debug" in sys.argv)
    logger.info(f"Starting Strive Mod Manager v{__version__}")

    try:
        app = StriveManagerApp()
        app.run()
    except Exception as e:
        logger.exception("Fatal error during startup")
        # Show error dialog if something goes wrong during startup
        import tkinter as tk
        from tkinter import messagebox

        root = tk.Tk()
        root.withdraw()
        messagebox.showerror(
            "Startup Error",
            f"Failed to start Strive Mod Manager:\n\n{e}"
        )
        root.destroy()
        sys.exit(1)
    finally:
        logger.info("Strive Mod Manager shutting down")


if __name__ == "__main__":
    main()
