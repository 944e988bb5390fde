"""Strive Mod Manager - mod folder setup for GUILTY GEAR STRIVE.

This application:
    - Looks for the Steam install of GUILTY GEAR STRIVE on Windows, macOS and Linux
    - Asks the user to confirm the detected folder or enter one manually
    - Creates the ~mods folder the game loads third-party content from

The application uses CustomTkinter for its GUI.

Package Structure:
    app: Main application entry point and orchestrator
    config: Fixed paths, data models, and path normalization
    core: Installation discovery (path prober and discovery controller)
    gui: User interface components (main window, result dialog, widgets)
    assets: Images and asset loading utilities

Quick Start:
    Run from command line::

        python -m strive_manager

    Or programmatically::

        from strive_manager.app import main
        main()

Files:
    - Log file: strive_manager.log in the per-user application data directory
    - Mods folder: <game>/RED/Content/Paks/~mods
"""

__version__ = "0.1.0"
__app_name__ = "Guilty Gear Strive Mod Manager"
