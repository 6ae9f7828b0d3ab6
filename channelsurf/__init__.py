"""Key handling, pickers, previews, fuzzy matching and layout for a fuzzy finder."""

__version__ = "0.11.9"

__all__ = [
    "event",
    "keymap",
    "picker",
    "preview",
    "spinner",
    "matcher",
    "theme",
    "layout",
    "keybindings",
]