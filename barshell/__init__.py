"""Configuration, icon glyphs, menu state and three-slot layout for a desktop status bar."""

__version__ = "0.1.0"
__all__ = ["centerbox", "config", "icons", "menu"]