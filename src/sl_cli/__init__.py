"""Command-line client for SL journey planning and departures."""

__version__ = "0.1.0"
