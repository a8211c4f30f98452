"""Eingabepruefung: Parameteraufloesung und Payload-Normalisierung."""

from .parameters import DEFAULT_F_PORT, resolve_f_port, resolve_group_id
from .payload import (
    classify_payload,
    decode_payload,
    detect_text_encoding,
    extract_raw_payload,
    normalize_payload,
)
from .schemas import BinaryPayload, RawPayload, SerializedBufferPayload, TextPayload

__all__ = [
    "DEFAULT_F_PORT",
    "BinaryPayload",
    "RawPayload",
    "SerializedBufferPayload",
    "TextPayload",
    "classify_payload",
    "decode_payload",
    "detect_text_encoding",
    "extract_raw_payload",
    "normalize_payload",
    "resolve_f_port",
    "resolve_group_id",
]
