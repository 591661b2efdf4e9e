"""Condensify: transcript summarization and email relay backend."""

__version__ = "0.1.0"
