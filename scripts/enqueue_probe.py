"""CLI-Skript, das einen Multicast-Downlink ueber die API einreiht.

Das Skript sendet eine Nachricht an `/enqueue`, gibt das Ergebnis aus und
liefert einen passenden Exit-Code, ideal fuer manuelle Smoke-Tests."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Iterable, Optional

import httpx
from dotenv import load_dotenv

# Umgebung aus .env einlesen, damit lokale Proben ohne manuelles Exportieren laufen.
load_dotenv()


def build_message(data: str, group_id: Optional[str], f_port: Optional[int]) -> Dict[str, Any]:
    """Baut die Nachricht im Format des Nodes."""

    message: Dict[str, Any] = {"payload": {"data": data}}
    if group_id:
        message["multicastGroupId"] = group_id
    if f_port is not None:
        message["fPort"] = f_port
    return message


def send_message(client: httpx.Client, base_url: str, message: Dict[str, Any]) -> Dict[str, Any]:
    """Sendet die Nachricht und liefert die Ergebnisnachricht."""

    response = client.post(f"{base_url}/enqueue", json=message)
    response.raise_for_status()
    return response.json()


def run_probe(
    base_url: str,
    data: str,
    group_id: Optional[str],
    f_port: Optional[int],
    timeout: float,
) -> int:
    """Fuehrt die Probe aus und gibt den Exit-Code zurueck."""

    message = build_message(data, group_id, f_port)
    with httpx.Client(timeout=timeout) as client:
        result = send_message(client, base_url, message)

    payload = result.get("payload") or {}
    if payload.get("success"):
        print(
            f"Eingereiht: Gruppe {payload.get('multicastGroupId')}, "
            f"fPort {payload.get('fPort')}, fCnt {payload.get('fCnt')}"
        )
        return 0

    error = result.get("error") or {}
    print(f"Fehlgeschlagen: {payload.get('error')} (Code {error.get('code')})")
    return 1


def build_arg_parser() -> argparse.ArgumentParser:
    """Erzeugt den CLI-Argumentparser."""

    parser = argparse.ArgumentParser(description="Probe fuer ChirpStack-Multicast-Downlinks")
    parser.add_argument("--base-url", default="http://127.0.0.1:8005", help="Basis-URL der API")
    parser.add_argument("--data", required=True, help="Nutzdaten als Hex, Base64 oder Text")
    parser.add_argument("--group-id", default=None, help="Multicast-Gruppen-ID")
    parser.add_argument("--f-port", type=int, default=None, help="fPort des Downlinks")
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP-Timeout in Sekunden")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI-Einstiegspunkt fuer das Skript."""

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        return run_probe(args.base_url, args.data, args.group_id, args.f_port, args.timeout)
    except httpx.HTTPError as error:
        print(f"Fehler bei der Probe: {error}")
        return 1


if __name__ == "__main__":  # pragma: no cover - manueller Aufruf
    sys.exit(main())
