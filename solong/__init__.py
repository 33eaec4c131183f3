"""Map validation, XPM texture reading and pixel images for a tile-based puzzle game."""

__version__ = "0.1.0"