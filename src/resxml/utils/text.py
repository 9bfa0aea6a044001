"""Text normalization and character classification helpers."""
from __future__ import annotations

import regex

# ISO controls, the Specials block (which also holds U+FFFF) and code points
# outside any named block are not printable.
_NON_PRINTABLE = regex.compile(r"[\p{Cc}\p{Block=Specials}\p{Block=No_Block}]")

_CHAR_UNDEFINED = "\uffff"
_BMP_MAX = 0xFFFF


def to_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="surrogatepass")
    return data


def is_printable_char(char: str) -> bool:
    """Return ``True`` when ``char`` can be written to resource XML verbatim.

    Classification is done per UTF-16 code unit. A code point above the BMP is
    stored as a surrogate pair and both halves sit in the surrogate blocks, so
    it always counts as printable.
    """

    if ord(char) > _BMP_MAX:
        return True
    if char == _CHAR_UNDEFINED:
        return False
    return _NON_PRINTABLE.match(char) is None


def unicode_escape(char: str) -> str:
    return f"\\u{ord(char):04x}"


__all__ = ["is_printable_char", "to_text", "unicode_escape"]
