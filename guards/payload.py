"""Normalisierung der Nutzdaten in eine eindeutige Bytefolge.

Erkennungsreihenfolge (der erste Treffer gewinnt, kein Weitersuchen):

1. binaere Daten werden unveraendert uebernommen,
2. Hex-Text mit gerader Laenge,
3. Base64-Text,
4. sonstiger Text als UTF-8,
5. serialisierter Buffer `{"type": "Buffer", "data": [...]}`,
6. alles andere ist ein `UnsupportedPayloadFormat`.

Hex wird vor Base64 geprueft, weil jeder Hex-String gerader Laenge auch aus
dem Base64-Alphabet besteht.
"""

from __future__ import annotations

import base64
import re
from typing import Any, Literal, Mapping

from guards.schemas import BinaryPayload, RawPayload, SerializedBufferPayload, TextPayload
from models.errors import PayloadDecodeError, UnsupportedPayloadFormat

TextEncoding = Literal["hex", "base64", "utf-8"]

_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")
_BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/]+={0,2}")


def _is_serialized_buffer(value: Any) -> bool:
    return (
        isinstance(value, Mapping)
        and value.get("type") == "Buffer"
        and isinstance(value.get("data"), (list, tuple))
    )


def extract_raw_payload(payload: Any) -> Any:
    """Nimmt `payload["data"]`, sofern vorhanden, sonst den ganzen Payload.

    Ein serialisierter Buffer auf oberster Ebene ist selbst der Payload und
    wird nicht in sein `data`-Array aufgeloest.
    """

    if isinstance(payload, Mapping) and not _is_serialized_buffer(payload):
        data = payload.get("data")
        if data is not None:
            return data
    return payload


def detect_text_encoding(text: str) -> TextEncoding:
    """Bestimmt das Encoding eines Strings ohne ihn zu dekodieren.

    Base64 gilt nur, wenn die Laenge ohne Padding dekodierbar ist; ein
    einzelnes ueberzaehliges Zeichen (Laenge mod 4 == 1) ist kein Base64.
    """

    if _HEX_PATTERN.fullmatch(text) and len(text) % 2 == 0:
        return "hex"
    if _BASE64_PATTERN.fullmatch(text) and len(text.rstrip("=")) % 4 != 1:
        return "base64"
    return "utf-8"


def classify_payload(raw: Any) -> RawPayload:
    """Ordnet die Rohdaten genau einer Variante der Payload-Union zu.

    Raises:
        UnsupportedPayloadFormat: Fuer Zahlen, Listen, beliebige Objekte usw.
    """

    if isinstance(raw, (bytes, bytearray, memoryview)):
        return BinaryPayload(data=bytes(raw))
    if isinstance(raw, str):
        return TextPayload(text=raw)
    if _is_serialized_buffer(raw):
        return SerializedBufferPayload(data=tuple(raw["data"]))
    raise UnsupportedPayloadFormat(
        f"Nicht unterstuetztes Datenformat: {type(raw).__name__}",
        details=type(raw).__name__,
    )


def _decode_text(text: str) -> bytes:
    encoding = detect_text_encoding(text)
    if encoding == "hex":
        return bytes.fromhex(text)
    if encoding == "base64":
        stripped = text.rstrip("=")
        padded = stripped + "=" * (-len(stripped) % 4)
        return base64.b64decode(padded, validate=True)
    return text.encode("utf-8")


def decode_payload(raw: RawPayload) -> bytes:
    """Dekodiert eine klassifizierte Payload in Bytes.

    Raises:
        PayloadDecodeError: Bei fehlerhaften Daten, mit der Originalmeldung.
    """

    try:
        if isinstance(raw, BinaryPayload):
            return raw.data
        if isinstance(raw, TextPayload):
            return _decode_text(raw.text)
        return bytes(raw.data)
    except (TypeError, ValueError) as exc:
        raise PayloadDecodeError(str(exc), details=type(exc).__name__) from exc


def normalize_payload(payload: Any) -> bytes:
    """Extrahiert, klassifiziert und dekodiert die Nutzdaten eines Events."""

    return decode_payload(classify_payload(extract_raw_payload(payload)))
