"""Radar detection grid, UDP and serial line transport, and a controller joining them."""

__version__ = "0.1.0"

__all__ = ["__version__"]