"""Inspect and edit PATH-style search-path strings."""

__version__ = "0.1.0"
