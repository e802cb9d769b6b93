"""Screenplay-style acceptance testing core."""

__version__ = "0.1.0"
