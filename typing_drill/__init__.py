"""Typing Drill: terminal typing practice."""

__version__ = "0.1.0"
