"""C-style character, memory, conversion, string, output, line-reading and linked-list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "convert", "cstring", "text", "output", "lines", "linked"]