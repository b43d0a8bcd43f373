"""Grid-based raycasting viewer for .cub scene files, with an XPM reader."""

__version__ = "0.1.0"