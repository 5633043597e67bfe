"""Solutions to classic algorithm exercises as plain Python functions and classes."""

__version__ = "0.1.0"