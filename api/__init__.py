"""Transaction Dashboard API."""

__version__ = "1.0.0"
