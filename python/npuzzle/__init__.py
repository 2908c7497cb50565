"""Informed-search solver for the n-puzzle with a spiral goal."""

__version__ = "0.1.0"
