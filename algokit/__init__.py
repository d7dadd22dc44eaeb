"""Array, search, matrix, parentheses and binary-tree algorithms."""

__version__ = "0.1.0"