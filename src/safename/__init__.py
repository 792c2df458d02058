"""Filesystem-safe, collision-free filename resolution."""

__version__ = "0.1.0"
