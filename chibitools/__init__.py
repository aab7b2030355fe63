"""Asset tools for an RGB565 game engine: image conversion, game file access, logging and asset commands."""

__version__ = "0.1.0"