"""Varianten der erkannten Nutzdatenformate.

Bewusst ohne Pydantic-Validierung: die Rohdaten werden unveraendert
uebernommen und erst beim Dekodieren geprueft."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class BinaryPayload:
    """Bereits binaere Daten (bytes, bytearray, memoryview)."""

    data: bytes


@dataclass(frozen=True)
class TextPayload:
    """Textuelle Nutzdaten; das konkrete Encoding wird beim Dekodieren erkannt."""

    text: str


@dataclass(frozen=True)
class SerializedBufferPayload:
    """Serialisierter Buffer der Form `{"type": "Buffer", "data": [..]}`."""

    data: tuple[Any, ...]


RawPayload = Union[BinaryPayload, TextPayload, SerializedBufferPayload]
