"""Fetch a web page with a minimal HTTP/1.1 GET request over TCP."""

__version__ = "0.1.0"
__all__ = ["__version__"]