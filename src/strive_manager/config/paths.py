"""Fixed paths and path fragments for GUILTY GEAR STRIVE installations"""

import os
import sys
import tempfile
from pathlib import Path


class GamePaths:
    """Default paths and layout constants for the game's Steam install.

    Candidate locations are kept as plain strings: discovery compares the
    probed path against user input byte for byte, so the exact text matters.
    """

    # Asset directory inside the game folder that holds the .pak files
    PAKS_SUFFIX = "/RED/Content/Paks/"
    PAKS_RELATIVE = "RED/Content/Paks/"

    # Directory the game loads third-party content from, created under Paks
    MODS_DIR_NAME = "~mods"

    # Shown in place of a path when discovery fails
    NOT_FOUND = "Not found"

    # Windows Steam roots (order matters: x86 Program Files wins)
    WINDOWS_CANDIDATES = (
        "C:\\Program Files (x86)\\Steam\\steamapps\\common\\GUILTY GEAR STRIVE\\RED\\Content\\Paks\\",
        "C:\\Program Files\\Steam\\steamapps\\common\\GUILTY GEAR STRIVE\\RED\\Content\\Paks\\",
    )

    # macOS: system-wide app bundle, then a suffix joined onto $HOME
    MACOS_APP_CANDIDATE = "/Applications/Steam.app/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/"
    MACOS_HOME_SUFFIX = "/Library/Application Support/Steam/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/"

    # Linux: native Steam, then the Flatpak Steam sandbox
    LINUX_HOME_SUFFIXES = (
        "/.local/share/Steam/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/",
        "/.var/app/com.valvesoftware.Steam/.local/share/Steam/steamapps/common/GUILTY GEAR STRIVE/RED/Content/Paks/",
    )

    # Application data folder and log file names
    CONFIG_DIR_NAME = "StriveModManager"
    CONFIG_DIR_NAME_XDG = "strive-mod-manager"
    LOG_FILE_NAME = "strive_manager.log"

    @classmethod
    def mods_dir_for(cls, paks_path: str) -> Path:
        """Get the ~mods directory that belongs under a Paks directory.

        Args:
            paks_path: Resolved Paks directory

        Returns:
            Path to the ~mods directory (not created)
        """
        return Path(paks_path) / cls.MODS_DIR_NAME

    @classmethod
    def config_dir(cls) -> Path:
        """Get the per-user application data directory for this host.

        Resolved on each call rather than at import. When no home directory
        can be determined, the system temp directory is used instead.

        Returns:
            Path to the application data directory (not created)
        """
        if sys.platform in ("win32", "cygwin"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / cls.CONFIG_DIR_NAME

        # expanduser leaves "~" untouched when no home can be found
        home = os.path.expanduser("~")
        if home == "~" or not home:
            return Path(tempfile.gettempdir()) / cls.CONFIG_DIR_NAME_XDG

        if sys.platform == "darwin":
            return Path(home) / "Library" / "Application Support" / cls.CONFIG_DIR_NAME
        if sys.platform in ("win32", "cygwin"):
            return Path(home) / "AppData" / "Roaming" / cls.CONFIG_DIR_NAME
        return Path(home) / ".config" / cls.CONFIG_DIR_NAME_XDG

    @classmethod
    def log_file(cls) -> Path:
        """Get the path of the application log file."""
        return cls.config_dir() / cls.LOG_FILE_NAME

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the application data directory exists.

        Returns:
            Path to the application data directory
        """
        path = cls.config_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path
