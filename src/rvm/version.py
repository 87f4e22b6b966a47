"""Version information for rvm."""

__version__ = "0.0.3"
