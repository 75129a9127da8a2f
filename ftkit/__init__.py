"""Character, string, search, memory, linked-list, line-reading and formatted-output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "lines", "memory", "strings", "search", "lists", "output"]