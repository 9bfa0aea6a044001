"""Utility exports."""
from .text import is_printable_char, to_text, unicode_escape

__all__ = [
    "is_printable_char",
    "to_text",
    "unicode_escape",
]
