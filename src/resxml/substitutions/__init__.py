"""Substitution package exports."""
from .scanner import (
    DEFAULT_NON_POSITIONAL_LIMIT,
    UNLIMITED,
    enumerate_non_positional_substitutions_if_required,
    find_substitutions,
    has_multiple_non_positional_substitutions,
)

__all__ = [
    "DEFAULT_NON_POSITIONAL_LIMIT",
    "UNLIMITED",
    "enumerate_non_positional_substitutions_if_required",
    "find_substitutions",
    "has_multiple_non_positional_substitutions",
]
