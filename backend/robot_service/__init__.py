"""Robot fleet simulation service."""

__version__ = "0.1.0"
