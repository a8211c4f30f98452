"""Liest Konfigurationswerte aus der .env-Datei und stellt sie zentral bereit.

Das Modul nutzt `python-dotenv`, damit Server, API-Token und Node-Parameter
ueberall identisch sind. Alle Konstanten werden beim Import berechnet."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv  # type: ignore[import]

CONFIG_DIR = Path(__file__).resolve().parent
ROOT_ENV_FILE = CONFIG_DIR.parent / ".env"
EXAMPLE_ENV_FILE = CONFIG_DIR / ".env.example"

# Prioritaet: Projektweite .env > Beispieldatei (nur als Fallback).
if ROOT_ENV_FILE.exists():
    load_dotenv(ROOT_ENV_FILE)
elif EXAMPLE_ENV_FILE.exists():
    load_dotenv(EXAMPLE_ENV_FILE)


def _as_bool(value: str, default: bool = False) -> bool:
    """Interpretation einer Umgebungsvariable als boolescher Wert."""

    if value is None:
        return default
    return str(value).lower() in {"1", "true", "yes", "on"}


def _as_optional_int(value: str | None) -> int | None:
    """Leere Werte bleiben `None`, damit die Fallback-Kette greift."""

    if value is None or not value.strip():
        return None
    return int(value)


# --- ChirpStack-Server ---
CHIRPSTACK_SERVER = os.getenv("CHIRPSTACK_SERVER", "")
CHIRPSTACK_API_TOKEN = os.getenv("CHIRPSTACK_API_TOKEN", "")
CHIRPSTACK_SECURE = _as_bool(os.getenv("CHIRPSTACK_SECURE", "false"))

# --- Multicast-Node ---
MULTICAST_GROUP_ID = os.getenv("MULTICAST_GROUP_ID", "") or None
MULTICAST_F_PORT = _as_optional_int(os.getenv("MULTICAST_F_PORT"))
MULTICAST_DEFAULT_F_PORT = int(os.getenv("MULTICAST_DEFAULT_F_PORT", "10"))
MULTICAST_DEBUG = _as_bool(os.getenv("MULTICAST_DEBUG", "false"))
STATUS_RESET_DELAY = float(os.getenv("STATUS_RESET_DELAY", "3"))

# --- Tracing-Konfiguration ---
MULTICAST_TRACE_ENABLED = _as_bool(os.getenv("MULTICAST_TRACE_ENABLED", "false"))
LOG_DIR = os.getenv("LOG_DIR", "logs")
