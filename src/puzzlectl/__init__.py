"""Exact-arithmetic puzzle simulators with a Click front end."""

__version__ = "0.1.0"
