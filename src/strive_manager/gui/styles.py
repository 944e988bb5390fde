"""Theme and style constants for the GUI.

All GUI components should reference these constants to maintain consistent styling.

Constants:
    COLORS: Color palette for status text and buttons
    FONTS: Font family, size, and weight configurations
    PADDING: Spacing values for margins and padding
    WINDOW_SIZES: Default and minimum window dimensions
"""

# Color palette - semantic color names for consistent theming
COLORS = {
    "primary": "#1f538d",        # Main action buttons (blue)
    "primary_hover": "#14375e",  # Primary button hover state
    "success": "#2d8a4e",        # Found / confirm (green)
    "success_hover": "#1e5c34",  # Success button hover state
    "danger": "#dc3545",         # Not found / exit (red)
    "danger_hover": "#a71d2a",   # Danger button hover state
    "muted": "#6c757d",          # Secondary text (gray)
}

# Font configurations - tuple format: (family, size, weight)
FONTS = {
    "title": ("Segoe UI", 18, "bold"),   # Window heading
    "heading": ("Segoe UI", 14, "bold"), # Menu item titles, dialog status
    "body": ("Segoe UI", 12),            # Standard body text
    "small": ("Segoe UI", 10),           # Captions, status bar
    "icon": ("Segoe UI", 18),            # Glyph buttons (gear)
}

# Padding and spacing values in pixels
PADDING = {
    "small": 4,
    "medium": 10,
    "large": 20,
}

# Window sizes - tuple format: (width, height)
WINDOW_SIZES = {
    "main": (640, 420),
    "min_main": (400, 200),
    "result_dialog": (520, 260),
    "sidebar_width": 140,
}
