"""Discovery result dialog: confirm the found install or enter one manually"""

from pathlib import Path
from typing import Callable, Optional

import customtkinter as ctk

from ..core.discovery import DiscoveryController
from ..logging_config import get_logger
from .styles import COLORS, FONTS, PADDING, WINDOW_SIZES
from .widgets.path_selector import PathSelector

logger = get_logger("result_dialog")


class ResultDialog(ctk.CTkToplevel):
    """Modal dialog showing the outcome of installation discovery.

    Two presentations, picked from the controller state on every redraw:
    - found: the path plus Yes/No buttons
    - not found: a manual path entry plus Check/Exit buttons

    The dialog never touches discovery state itself; every button calls a
    DiscoveryController operation and then redraws.
    """

    def __init__(
        self,
        parent,
        controller: DiscoveryController,
        on_confirmed: Optional[Callable[[Optional[Path]], None]] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ):
        """Initialize the result dialog.

        Args:
            parent: Parent window
            controller: Discovery controller that owns the state
            on_confirmed: Called with the ~mods path (or None) after "Yes"
            on_exit: Called when the user asks to quit the application
        """
        super().__init__(parent)

        self.controller = controller
        self.on_confirmed = on_confirmed
        self.on_exit = on_exit
        self.path_selector: Optional[PathSelector] = None

        self.title("Result")
        width, height = WINDOW_SIZES["result_dialog"]
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)

        self.transient(parent)
        self.grab_set()

        # A decision is required; closing the window is the same as Exit
        self.protocol("WM_DELETE_WINDOW", self._exit)

        self.container = ctk.CTkFrame(self)
        self.container.pack(fill="both", expand=True, padx=PADDING["large"], pady=PADDING["large"])

        self._render()
        self.focus_force()

    def _render(self):
        """Rebuild the dialog contents from the controller state."""
        for child in self.container.winfo_children():
            child.destroy()
        self.path_selector = None

        if self.controller.found:
            self._create_found_view()
        else:
            self._create_not_found_view()

    def _create_found_view(self):
        status = ctk.CTkLabel(
            self.container,
            text="Steam and GUILTY GEAR STRIVE found",
            font=FONTS["heading"],
            text_color=COLORS["success"],
        )
        status.pack(anchor="w", pady=(0, PADDING["medium"]))

        location = ctk.CTkLabel(
            self.container,
            text=f"Found at: {self.controller.path}",
            font=FONTS["body"],
            wraplength=WINDOW_SIZES["result_dialog"][0] - 2 * PADDING["large"] - 20,
            justify="left",
        )
        location.pack(anchor="w", pady=(0, PADDING["medium"]))

        question = ctk.CTkLabel(self.container, text="Is this the correct installation?", font=FONTS["body"])
        question.pack(anchor="w")

        button_frame = ctk.CTkFrame(self.container, fg_color="transparent")
        button_frame.pack(fill="x", pady=(PADDING["medium"], 0))

        yes_btn = ctk.CTkButton(
            button_frame,
            text="Yes",
            width=100,
            fg_color=COLORS["success"],
            hover_color=COLORS["success_hover"],
            command=self._confirm,
        )
        yes_btn.pack(side="left")

        no_btn = ctk.CTkButton(
            button_frame,
            text="No",
            width=100,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self._reject,
        )
        no_btn.pack(side="left", padx=(PADDING["medium"], 0))

    def _create_not_found_view(self):
        status = ctk.CTkLabel(
            self.container,
            text="Steam not found",
            font=FONTS["heading"],
            text_color=COLORS["danger"],
        )
        status.pack(anchor="w", pady=(0, PADDING["small"]))

        desc = ctk.CTkLabel(
            self.container,
            text="A Steam installation with GUILTY GEAR STRIVE was not found in the default directories.",
            font=FONTS["small"],
            text_color="gray",
            wraplength=WINDOW_SIZES["result_dialog"][0] - 2 * PADDING["large"] - 20,
            justify="left",
        )
        desc.pack(anchor="w", pady=(0, PADDING["medium"]))

        prompt = ctk.CTkLabel(
            self.container,
            text="Enter custom directory for GUILTY GEAR STRIVE (up to the game folder):",
            font=FONTS["body"],
        )
        prompt.pack(anchor="w")

        self.path_selector = PathSelector(
            self.container,
            label="Folder:",
            initial_text=self.controller.override_input,
            on_submit=self._check,
            fg_color="transparent",
        )
        self.path_selector.pack(fill="x", pady=(PADDING["small"], 0))
        self.path_selector.focus_entry()

        if self.controller.override_checked and not self.controller.override_valid:
            error = ctk.CTkLabel(
                self.container,
                text="No GUILTY GEAR STRIVE installation folder found at the specified path",
                font=FONTS["small"],
                text_color=COLORS["danger"],
            )
            error.pack(anchor="w", pady=(PADDING["small"], 0))

        button_frame = ctk.CTkFrame(self.container, fg_color="transparent")
        button_frame.pack(fill="x", pady=(PADDING["medium"], 0))

        check_btn = ctk.CTkButton(
            button_frame,
            text="Check",
            width=100,
            command=lambda: self._check(self.path_selector.get_text()),
        )
        check_btn.pack(side="left")

        exit_btn = ctk.CTkButton(
            button_frame,
            text="Exit",
            width=100,
            fg_color=COLORS["danger"],
            hover_color=COLORS["danger_hover"],
            command=self._exit,
        )
        exit_btn.pack(side="left", padx=(PADDING["medium"], 0))

    def _confirm(self):
        mods_path = self.controller.confirm()
        self.grab_release()
        self.destroy()
        if self.on_confirmed:
            self.on_confirmed(mods_path)

    def _reject(self):
        self.controller.reject()
        self._render()

    def _check(self, raw_text: str):
        self.controller.submit_override(raw_text)
        self._render()

    def _exit(self):
        logger.info("User chose to exit from the discovery dialog")
        self.grab_release()
        self.destroy()
        if self.on_exit:
            self.on_exit()
