"""Detection and renumbering of printf-style substitutions."""
from __future__ import annotations

from typing import List, Optional

from ..models import SubstitutionScan

UNLIMITED = -1
DEFAULT_NON_POSITIONAL_LIMIT = 4


def find_substitutions(text: Optional[str], non_positional_limit: int = UNLIMITED) -> SubstitutionScan:
    """Locate ``%`` placeholders in ``text``.

    Parameters
    ----------
    text:
        Format string to scan. ``None`` yields an empty result.
    non_positional_limit:
        Stop once this many non-positional placeholders were found.
        ``UNLIMITED`` scans the whole string.

    Returns
    -------
    SubstitutionScan
        Offsets of every ``%`` that starts a non-positional placeholder (any
        ``%`` that is neither ``%%`` nor ``%<digits>$``) and of every
        positional one. A ``%`` ending the string counts as non-positional.
    """

    scan = SubstitutionScan()
    if text is None:
        return scan
    limit = None if non_positional_limit == UNLIMITED else non_positional_limit

    length = len(text)
    cursor = 0
    while (pos := text.find("%", cursor)) != -1:
        cursor = pos + 1
        if cursor == length:
            scan.non_positional.append(pos)
            break
        char = text[cursor]
        cursor += 1
        if char == "%":
            continue
        if "0" <= char <= "9" and cursor < length:
            while True:
                char = text[cursor]
                cursor += 1
                if not ("0" <= char <= "9" and cursor < length):
                    break
            if char == "$":
                scan.positional.append(pos)
                continue

        scan.non_positional.append(pos)
        if limit is not None and len(scan.non_positional) >= limit:
            break
    return scan


def has_multiple_non_positional_substitutions(
    text: Optional[str], non_positional_limit: int = DEFAULT_NON_POSITIONAL_LIMIT
) -> bool:
    return find_substitutions(text, non_positional_limit).has_multiple_non_positional()


def enumerate_non_positional_substitutions_if_required(
    text: Optional[str], non_positional_limit: int = DEFAULT_NON_POSITIONAL_LIMIT
) -> Optional[str]:
    """Give each non-positional placeholder an explicit ``N$`` index.

    ``"%s and %s"`` becomes ``"%1$s and %2$s"``. Strings with at most one
    placeholder, or with positional placeholders only, are returned as is.
    """

    scan = find_substitutions(text, non_positional_limit)
    if not scan.has_multiple_non_positional():
        return text

    out: List[str] = []
    cursor = 0
    for count, pos in enumerate(scan.non_positional, start=1):
        out.append(text[cursor : pos + 1])
        out.append(f"{count}$")
        cursor = pos + 1
    out.append(text[cursor:])
    return "".join(out)


__all__ = [
    "DEFAULT_NON_POSITIONAL_LIMIT",
    "UNLIMITED",
    "enumerate_non_positional_substitutions_if_required",
    "find_substitutions",
    "has_multiple_non_positional_substitutions",
]
