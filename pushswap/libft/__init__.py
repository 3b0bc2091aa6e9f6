"""Character, memory, string, output and linked-list helpers."""

__all__ = ["chars", "lists", "memory", "output", "strings", "transform"]