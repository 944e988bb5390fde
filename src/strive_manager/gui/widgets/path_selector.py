"""Reusable path entry widget"""

from tkinter import filedialog
from typing import Callable, Optional

import customtkinter as ctk


class PathSelector(ctk.CTkFrame):
    """A text entry with a Browse button for picking a directory.

    The entry text is handed over exactly as typed; normalization happens
    in the discovery controller.
    """

    def __init__(
        self,
        master,
        label: str = "Path:",
        initial_text: str = "",
        on_submit: Optional[Callable[[str], None]] = None,
        **kwargs
    ):
        """Initialize the path selector widget.

        Args:
            master: Parent widget
            label: Label text to display
            initial_text: Initial entry text
            on_submit: Called with the entry text when Return is pressed
            **kwargs: Additional arguments for CTkFrame
        """
        super().__init__(master, **kwargs)

        self.on_submit = on_submit

        self.grid_columnconfigure(1, weight=1)

        self.label = ctk.CTkLabel(self, text=label)
        self.label.grid(row=0, column=0, padx=(0, 10), sticky="w")

        self.path_var = ctk.StringVar(value=initial_text)
        self.entry = ctk.CTkEntry(self, textvariable=self.path_var, width=300)
        self.entry.grid(row=0, column=1, padx=(0, 10), sticky="ew")
        self.entry.bind("<Return>", self._on_return)

        self.browse_btn = ctk.CTkButton(
            self,
            text="Browse",
            width=80,
            command=self._browse,
        )
        self.browse_btn.grid(row=0, column=2, sticky="e")

    def _browse(self):
        """Open a directory dialog and put the selection in the entry."""
        selected = filedialog.askdirectory(title="Select GUILTY GEAR STRIVE Folder")
        if selected:
            self.set_text(selected)

    def _on_return(self, event=None):
        if self.on_submit:
            self.on_submit(self.get_text())

    def get_text(self) -> str:
        """Get the raw entry text."""
        return self.path_var.get()

    def set_text(self, text: str):
        """Replace the entry text."""
        self.path_var.set(text)

    def focus_entry(self):
        self.entry.focus_set()
