"""Aufloesung von Multicast-Gruppe und fPort aus Konfiguration und Nachricht.

Pro Ebene werden der ChirpStack-Name (`multicastGroupId`, `fPort`) und der
generische Name (`groupId`, `port`) akzeptiert, in genau dieser Reihenfolge."""

from __future__ import annotations

from typing import Any, Mapping

from models.errors import MissingParameter

DEFAULT_F_PORT = 10

_GROUP_KEYS = ("multicastGroupId", "groupId")
_PORT_KEYS = ("fPort", "port")


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _lookup(source: Any, keys: tuple[str, ...]) -> Any:
    if not isinstance(source, Mapping):
        return None
    for key in keys:
        value = source.get(key)
        if _is_present(value):
            return value
    return None


def _first_present(*candidates: Any) -> Any:
    for candidate in candidates:
        if _is_present(candidate):
            return candidate
    return None


def resolve_group_id(static_group_id: Any, msg: Mapping[str, Any]) -> Any:
    """Liefert die Multicast-Gruppen-ID.

    Reihenfolge: statische Konfiguration, Nachricht, `msg["payload"]`.
    Der erste nicht-leere Wert gewinnt.

    Raises:
        MissingParameter: Wenn keine Quelle eine ID liefert.
    """

    group_id = _first_present(
        static_group_id,
        _lookup(msg, _GROUP_KEYS),
        _lookup(msg.get("payload"), _GROUP_KEYS),
    )
    if group_id is None:
        raise MissingParameter("groupId")
    return group_id


def resolve_f_port(
    static_f_port: Any,
    msg: Mapping[str, Any],
    default: int = DEFAULT_F_PORT,
) -> Any:
    """Liefert den fPort; faellt immer auf `default` zurueck."""

    f_port = _first_present(
        static_f_port,
        _lookup(msg, _PORT_KEYS),
        _lookup(msg.get("payload"), _PORT_KEYS),
    )
    return default if f_port is None else f_port
