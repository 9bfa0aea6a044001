"""Encoder package exports."""
from __future__ import annotations

from typing import Callable, Dict, Optional

from ..models import EncodingTarget
from ..utils.text import to_text
from .xml import encode_as_res_xml_attr, encode_as_xml_value, escape_xml_chars

_ENCODERS: Dict[EncodingTarget, Callable[[Optional[str]], Optional[str]]] = {
    EncodingTarget.XML: escape_xml_chars,
    EncodingTarget.ATTR: encode_as_res_xml_attr,
    EncodingTarget.VALUE: encode_as_xml_value,
}


def encode(data: str | bytes | None, target: EncodingTarget | str = EncodingTarget.VALUE) -> Optional[str]:
    """Encode ``data`` with the encoder registered for ``target``."""

    encoder = _ENCODERS[EncodingTarget(target)]
    if data is None:
        return None
    return encoder(to_text(data))


__all__ = ["encode", "encode_as_res_xml_attr", "encode_as_xml_value", "escape_xml_chars"]
