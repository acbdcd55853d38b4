"""A tile-based puzzle game played on .ber map files, with an XPM reader."""

__version__ = "1.0.0"
__all__ = ["colors", "xpm", "printf", "pixels", "mapfile", "game", "app"]