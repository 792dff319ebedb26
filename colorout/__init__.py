"""Colored, optionally bold terminal output through plain objects, builders and timestamped status messages."""

__version__ = "6.6.3"