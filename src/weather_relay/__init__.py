"""Aggregate, normalize and re-broadcast weather data from third-party sources."""

__version__ = "0.1.0"
