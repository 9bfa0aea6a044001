"""Shared domain models used across resxml."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class EncodingTarget(str, Enum):
    XML = "xml"
    ATTR = "attr"
    VALUE = "value"


@dataclass(slots=True)
class SubstitutionScan:
    """Offsets of ``%`` placeholders found in a format string."""

    non_positional: List[int] = field(default_factory=list)
    positional: List[int] = field(default_factory=list)

    def total(self) -> int:
        return len(self.non_positional) + len(self.positional)

    def has_multiple_non_positional(self) -> bool:
        return bool(self.non_positional) and self.total() > 1


__all__ = ["EncodingTarget", "SubstitutionScan"]
