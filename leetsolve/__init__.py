"""Solutions to classic algorithm puzzles, one module per puzzle."""

__version__ = "0.1.0"