"""Version information for the lineup setter."""

__version__ = "0.1.0"
