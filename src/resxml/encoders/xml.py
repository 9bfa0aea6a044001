"""Escaping of strings written into decoded resource XML."""
from __future__ import annotations

from typing import List, Optional

import regex

from ..utils.text import is_printable_char, unicode_escape

_SENTINEL_LEADS = frozenset("#@?")

_XML_SPECIALS = regex.compile(r"&|<|\]\]>")
_XML_REPLACEMENTS = {"&": "&amp;", "<": "&lt;", "]]>": "]]&gt;"}


def escape_xml_chars(text: Optional[str]) -> Optional[str]:
    """Escape ``&``, ``<`` and ``]]>`` in a single pass over ``text``."""

    if not text:
        return text
    return _XML_SPECIALS.sub(lambda match: _XML_REPLACEMENTS[match.group()], text)


def encode_as_res_xml_attr(text: Optional[str]) -> Optional[str]:
    """Encode ``text`` for use inside a double-quoted attribute value.

    Backslashes are doubled, quotes become ``&quot;``, newlines become the
    two-character ``\\n`` escape and anything non-printable becomes a
    ``\\uXXXX`` escape. A leading ``#``, ``@`` or ``?`` is escaped so it is not
    read as a reference.
    """

    if not text:
        return text

    out: List[str] = []
    if text[0] in _SENTINEL_LEADS:
        out.append("\\")

    for char in text:
        if char == "\\":
            out.append("\\\\")
        elif char == '"':
            out.append("&quot;")
        elif char == "\n":
            out.append("\\n")
        elif not is_printable_char(char):
            out.append(unicode_escape(char))
        else:
            out.append(char)
    return "".join(out)


def encode_as_xml_value(text: Optional[str]) -> Optional[str]:
    """Encode ``text`` as the content of a string resource element.

    Inline style tags (``<b>``, ``</i>`` ...) are copied verbatim. Whitespace
    runs, leading or trailing spaces, apostrophes and newlines cause the
    surrounding plain-text segment to be wrapped in double quotes so the
    resource compiler keeps them. The opening quote is inserted after the fact
    at ``start``, the buffer index where the current segment began.
    """

    if not text:
        return text

    out: List[str] = []
    if text[0] in _SENTINEL_LEADS:
        out.append("\\")

    last = len(text) - 1
    in_tag = False
    enclose = False
    was_space = True
    start = 0

    for index, char in enumerate(text):
        if in_tag:
            if char == ">":
                in_tag = False
                start = len(out) + 1
                enclose = False
        elif char == " ":
            if was_space:
                enclose = True
            was_space = True
        else:
            was_space = False
            if char in ('\\', '"'):
                out.append("\\")
            elif char in ("'", "\n"):
                enclose = True
            elif char == "<":
                in_tag = True
                if enclose:
                    out.insert(start, '"')
                    out.append('"')
            elif not is_printable_char(char):
                # trailing NUL is a terminator left over from the string pool
                if index == last and char == "\x00":
                    continue
                out.append(unicode_escape(char))
                continue
        out.append(char)

    if enclose or was_space:
        out.insert(start, '"')
        out.append('"')
    return "".join(out)


__all__ = ["escape_xml_chars", "encode_as_res_xml_attr", "encode_as_xml_value"]
