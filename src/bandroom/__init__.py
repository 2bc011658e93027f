"""Bandroom - band rehearsal scheduling and shared song library."""

__version__ = "0.1.0"
