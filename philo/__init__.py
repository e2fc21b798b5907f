"""Dining philosophers simulation: argument parsing, a threaded table and a command."""

__version__ = "0.1.0"
__all__ = ["__version__"]