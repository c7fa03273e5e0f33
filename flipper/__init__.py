"""Guard-clause and ternary refactorings for C-family source buffers."""

__version__ = "0.1.0"
