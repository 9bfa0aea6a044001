"""Encoders for strings written into decoded Android resource XML."""
from .encoders import encode, encode_as_res_xml_attr, encode_as_xml_value, escape_xml_chars
from .models import EncodingTarget, SubstitutionScan
from .substitutions import (
    enumerate_non_positional_substitutions_if_required,
    find_substitutions,
    has_multiple_non_positional_substitutions,
)
from .utils.text import is_printable_char
from .version import __version__

__all__ = [
    "EncodingTarget",
    "SubstitutionScan",
    "__version__",
    "encode",
    "encode_as_res_xml_attr",
    "encode_as_xml_value",
    "enumerate_non_positional_substitutions_if_required",
    "escape_xml_chars",
    "find_substitutions",
    "has_multiple_non_positional_substitutions",
    "is_printable_char",
]
