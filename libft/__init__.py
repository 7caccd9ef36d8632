"""Character, memory, string, output, linked-list and printf helpers."""

__version__ = "1.0.0"
__all__ = ["chars", "memory", "strings", "strtools", "output", "linked_list", "printf"]