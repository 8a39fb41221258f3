"""Fil de posts avec likes locaux."""

__version__ = "0.1.0"
