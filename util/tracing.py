"""Tracing-Helfer fuer Multicast-Aufrufe (Debug-Log und JSONL-Trace)."""

from __future__ import annotations

import base64
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Awaitable, Callable

import config
from models.types import QueueRequest

_LOGGER = logging.getLogger(__name__)


def log_request_debug(request: QueueRequest) -> None:
    """Gibt Gruppe, Port und Nutzdaten (hex/base64) im Log aus."""

    _LOGGER.info("=== Multicast Downlink ===")
    _LOGGER.info("Group ID: %s", request.group_id)
    _LOGGER.info("fPort: %s", request.f_port)
    _LOGGER.info("Data (hex): %s", request.payload.hex())
    _LOGGER.info("Data (base64): %s", base64.b64encode(request.payload).decode("ascii"))


async def traced_enqueue(
    request: QueueRequest,
    invoke: Callable[[], Awaitable[int]],
) -> int:
    """Fuehrt den Enqueue-Aufruf aus und schreibt optional einen Trace-Eintrag.

    Args:
        request: Der gesendete Queue-Eintrag.
        invoke: Coroutine-Factory, die den eigentlichen gRPC-Aufruf ausfuehrt.

    Returns:
        Frame-Counter der Antwort.
    """

    if not config.MULTICAST_TRACE_ENABLED:
        return await invoke()

    start = time.perf_counter()
    try:
        f_cnt = await invoke()
    except Exception as exc:
        _write_trace(request, start, None, f"{type(exc).__name__}: {exc}")
        raise
    _write_trace(request, start, f_cnt, None)
    return f_cnt


def _write_trace(
    request: QueueRequest,
    start: float,
    f_cnt: int | None,
    error_info: str | None,
) -> None:
    """Schreibt einen JSON-Trace-Eintrag; Dateifehler werden nur geloggt."""

    entry: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "multicast_group_id": str(request.group_id),
        "f_port": request.f_port,
        "data_hex": request.payload.hex(),
        "data_len": len(request.payload),
        "duration_ms": round((time.perf_counter() - start) * 1000, 3),
        "f_cnt": f_cnt,
        "error": error_info,
    }

    log_file = Path(config.LOG_DIR or "logs") / "multicast.log"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as file:
            file.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
    except OSError as exc:
        _LOGGER.warning("Trace-Eintrag nicht geschrieben (%s): %s", log_file, exc)
