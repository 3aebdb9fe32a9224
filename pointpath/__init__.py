"""Portable cursor and selection paths for rich-text document trees."""

__version__ = "0.1.0"
