"""Main application window with the feature list and logo sidebar."""

from pathlib import Path
from typing import Optional
import tkinter as tk

import customtkinter as ctk
from PIL import Image

from .. import __app_name__, __version__
from ..assets.loader import get_asset_path
from ..config.schema import MenuItem
from ..core.discovery import DiscoveryController
from ..logging_config import get_logger
from .result_dialog import ResultDialog
from .styles import COLORS, FONTS, PADDING, WINDOW_SIZES

logger = get_logger("main_window")

# Features listed in the main window. Selecting one is recorded but none
# of them is wired to an action yet.
MENU_ITEMS = (
    MenuItem(id=0, title="Enable Mods", label="Toggle mod loading for GGS"),
    MenuItem(id=1, title="Backup Save Data", label="Create a backup of your save file"),
    MenuItem(id=2, title="Restore Save Data", label="Restore a previous save backup"),
    MenuItem(id=3, title="Manage Mods", label="View and organize installed mods"),
)

LOGO_ASSET = "brisket.jpg"


class MainWindow(ctk.CTk):
    """Main application window.

    Layout:
    - Left: heading and a scrollable list of feature entries with a gear button
    - Right: sidebar with the logo
    - Bottom: status bar showing the resolved installation

    While the discovery controller awaits confirmation, the result dialog is
    shown on top of this window.
    """

    def __init__(self, controller: DiscoveryController):
        super().__init__()

        self.controller = controller
        self.selected_item: Optional[MenuItem] = None
        self.result_dialog: Optional[ResultDialog] = None
        self._logo_image: Optional[ctk.CTkImage] = None

        self.title(f"{__app_name__} v{__version__}")
        width, height = WINDOW_SIZES["main"]
        min_width, min_height = WINDOW_SIZES["min_main"]
        self.geometry(f"{width}x{height}")
        self.minsize(min_width, min_height)

        self._create_ui()

        if self.controller.awaiting_confirmation:
            self.after(100, self._show_result_dialog)

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _create_ui(self):
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._create_menu_area()
        self._create_sidebar()
        self._create_status_bar()

    def _create_menu_area(self):
        """Create the heading and the feature list."""
        content = ctk.CTkFrame(self, fg_color="transparent")
        content.grid(row=0, column=0, sticky="nsew", padx=PADDING["large"], pady=PADDING["large"])

        heading = ctk.CTkLabel(content, text="GUILTY GEAR STRIVE Mod Manager", font=FONTS["title"])
        heading.pack(anchor="w", pady=(0, PADDING["large"]))

        scroll_frame = ctk.CTkScrollableFrame(content)
        scroll_frame.pack(fill="both", expand=True)

        for item in MENU_ITEMS:
            self._create_menu_row(scroll_frame, item)

    def _create_menu_row(self, parent, item: MenuItem):
        row = ctk.CTkFrame(parent)
        row.pack(fill="x", pady=PADDING["small"])

        header = ctk.CTkFrame(row, fg_color="transparent")
        header.pack(fill="x", padx=PADDING["medium"], pady=(PADDING["small"], 0))

        title = ctk.CTkLabel(header, text=item.title, font=FONTS["heading"])
        title.pack(side="left")

        gear_btn = ctk.CTkButton(
            header,
            text="⚙",
            width=32,
            font=FONTS["icon"],
            command=lambda i=item: self._on_item_selected(i),
        )
        gear_btn.pack(side="right")

        label = ctk.CTkLabel(row, text=item.label, font=FONTS["body"], text_color="gray")
        label.pack(anchor="w", padx=PADDING["medium"], pady=(0, PADDING["small"]))

    def _create_sidebar(self):
        """Create the right-hand bar with the logo."""
        sidebar = ctk.CTkFrame(self, width=WINDOW_SIZES["sidebar_width"])
        sidebar.grid(row=0, column=1, sticky="ns")
        sidebar.pack_propagate(False)

        inner = ctk.CTkFrame(sidebar, fg_color="transparent")
        inner.pack(fill="x", pady=(PADDING["large"], 0))

        self._logo_image = self._load_logo(WINDOW_SIZES["sidebar_width"] - 2 * PADDING["medium"])
        if self._logo_image is not None:
            logo = ctk.CTkLabel(inner, text="", image=self._logo_image)
        else:
            logo = ctk.CTkLabel(inner, text="Image not found", font=FONTS["small"], text_color="gray")
        logo.pack()

        name_label = ctk.CTkLabel(inner, text="Character Name:", font=FONTS["body"])
        name_label.pack(pady=(PADDING["medium"], 0))

    def _create_status_bar(self):
        self.status_label = ctk.CTkLabel(
            self,
            text="",
            font=FONTS["small"],
            text_color=COLORS["muted"],
            anchor="w",
        )
        self.status_label.grid(row=1, column=0, columnspan=2, sticky="ew", padx=PADDING["medium"])
        self._refresh_status()

    def _load_logo(self, width: int) -> Optional[ctk.CTkImage]:
        """Load the sidebar logo scaled to the given width.

        Returns:
            The image, or None if the asset is missing or unreadable
        """
        logo_path = get_asset_path(LOGO_ASSET)
        if not logo_path.exists():
            logger.debug("Logo not found at %s", logo_path)
            return None

        try:
            image = Image.open(logo_path).convert("RGBA")
        except (OSError, ValueError) as e:
            logger.warning("Could not load logo %s: %s", logo_path, e)
            return None

        height = max(1, round(image.height * width / image.width))
        return ctk.CTkImage(light_image=image, dark_image=image, size=(width, height))

    def _show_result_dialog(self):
        """Show the discovery result dialog if a decision is pending."""
        if self.result_dialog is not None and self.result_dialog.winfo_exists():
            return
        if not self.controller.awaiting_confirmation:
            return

        self.result_dialog = ResultDialog(
            self,
            self.controller,
            on_confirmed=self._on_confirmed,
            on_exit=self._on_close,
        )

    def _on_confirmed(self, mods_path: Optional[Path]):
        self.result_dialog = None
        if mods_path is None:
            self._set_status(f"Installation: {self.controller.path} (could not create mods folder)")
        else:
            self._refresh_status()

    def _on_item_selected(self, item: MenuItem):
        self.selected_item = item
        logger.debug("Selected menu item %d (%s)", item.id, item.title)
        self._set_status(f"{item.title} is not available yet")

    def _refresh_status(self):
        if self.controller.found and not self.controller.awaiting_confirmation:
            self._set_status(f"Mods folder: {self.controller.mods_path}")
        else:
            self._set_status("Installation not confirmed")

    def _set_status(self, message: str):
        self.status_label.configure(text=message)

    def _on_close(self):
        """Shut down the Tk main loop normally."""
        try:
            self.quit()
            self.destroy()
        except tk.TclError as e:
            logger.debug("Window already closed: %s", e)
