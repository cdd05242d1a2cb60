"""Beyond Beauty Network marketing website."""

__version__ = "1.0.0"
