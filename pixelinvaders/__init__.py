"""A small arcade space shooter: game rules, pixel-art sprites and a pygame window."""

__version__ = "0.1.0"