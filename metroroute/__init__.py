"""Metro route finding over a CSV-defined network, with HTML and JSON route reports."""

__version__ = "0.1.0"
__all__ = ["__version__"]