"""Criteria evaluation engine for generated API route descriptions."""

__version__ = "0.1.0"
