"""NWS-backed weather summary service."""

__version__ = "0.1.0"
