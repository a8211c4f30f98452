"""Gemeinsame Pydantic-Typen fuer Requests und Ergebnisse der Pipeline."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def _utc_timestamp() -> str:
    """ISO-8601 in UTC mit Millisekunden und `Z`-Suffix."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class QueueRequest(BaseModel):
    """Ein Multicast-Queue-Eintrag; wird genau einmal gesendet.

    `group_id` und `f_port` werden bewusst nicht typisiert, da der Resolver
    nur auf Vorhandensein prueft und die Validierung ChirpStack ueberlaesst.
    """

    model_config = ConfigDict(frozen=True)

    group_id: Any
    f_port: Any
    payload: bytes


class ErrorInfo(BaseModel):
    """Fehlerdetails, die als `msg["error"]` weitergereicht werden."""

    message: str
    code: Any = None
    details: Any = None


class SuccessOutcome(BaseModel):
    """Erfolgreich eingereihter Downlink."""

    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    f_cnt: int = Field(alias="fCnt")
    multicast_group_id: Any = Field(alias="multicastGroupId")
    f_port: Any = Field(alias="fPort")
    timestamp: str = Field(default_factory=_utc_timestamp)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class FailureOutcome(BaseModel):
    """Fehlgeschlagenes Event inklusive Fehlerdetails."""

    success: Literal[False] = False
    error: ErrorInfo

    def to_payload(self) -> dict[str, Any]:
        return {"success": False, "error": self.error.message}


Outcome = SuccessOutcome | FailureOutcome


__all__ = ["ErrorInfo", "FailureOutcome", "Outcome", "QueueRequest", "SuccessOutcome"]
