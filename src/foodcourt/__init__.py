"""Data-access layer for the food ordering app backed by Firebase."""

__version__ = "0.1.0"
