"""Fehlertaxonomie der Multicast-Pipeline.

Alle Fehler tragen `message`, `code` und `details`, damit die Pipeline sie ohne
Sonderfaelle in ein `FailureOutcome` ueberfuehren kann."""

from __future__ import annotations

from typing import Any


class MulticastError(Exception):
    """Basisklasse fuer alle Fehler der Pipeline."""

    code: Any = "MULTICAST_ERROR"
    short_label = "Error"

    def __init__(self, message: str, code: Any = None, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details


class ConfigurationError(MulticastError):
    """Server oder API-Token fehlen; die Pipeline verarbeitet keine Events."""

    code = "CONFIGURATION_ERROR"


class MissingParameter(MulticastError):
    """Ein Pflichtparameter (z. B. `groupId`) ist in keiner Quelle vorhanden."""

    code = "MISSING_PARAMETER"
    short_label = "Missing group ID"

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Parameter fehlt: {parameter}", details=parameter)
        self.parameter = parameter


class UnsupportedPayloadFormat(MulticastError):
    """Die Nutzdaten passen zu keinem bekannten Format."""

    code = "UNSUPPORTED_PAYLOAD_FORMAT"
    short_label = "Invalid format"


class PayloadDecodeError(MulticastError):
    """Die Nutzdaten wurden erkannt, liessen sich aber nicht dekodieren."""

    code = "PAYLOAD_DECODE_ERROR"
    short_label = "Conversion error"


class RemoteServiceError(MulticastError):
    """Fehler des ChirpStack-Dienstes; `code` ist der numerische gRPC-Status."""

    code = 2

    @property
    def short_label(self) -> str:  # type: ignore[override]
        return f"Error: {self.code}"
