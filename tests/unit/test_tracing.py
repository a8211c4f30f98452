"""Tests fuer den JSONL-Trace der Enqueue-Aufrufe."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import config
from models.types import QueueRequest
from util import tracing


@pytest.fixture
def trace_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(config, "MULTICAST_TRACE_ENABLED", True)
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path))
    return tmp_path


def _request() -> QueueRequest:
    return QueueRequest(group_id="mc-1", f_port=10, payload=b"\x0a\x0b")


@pytest.mark.asyncio
async def test_traced_enqueue_writes_entry(trace_dir: Path) -> None:
    async def invoke() -> int:
        return 9

    assert await tracing.traced_enqueue(_request(), invoke) == 9

    lines = (trace_dir / "multicast.log").read_text(encoding="utf-8").splitlines()
    entry = json.loads(lines[0])
    assert entry["multicast_group_id"] == "mc-1"
    assert entry["data_hex"] == "0a0b"
    assert entry["f_cnt"] == 9
    assert entry["error"] is None


@pytest.mark.asyncio
async def test_traced_enqueue_records_errors(trace_dir: Path) -> None:
    async def invoke() -> int:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await tracing.traced_enqueue(_request(), invoke)

    entry = json.loads((trace_dir / "multicast.log").read_text(encoding="utf-8").splitlines()[0])
    assert entry["error"] == "RuntimeError: boom"
    assert entry["f_cnt"] is None


@pytest.mark.asyncio
async def test_tracing_disabled_writes_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "MULTICAST_TRACE_ENABLED", False)
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path))

    async def invoke() -> int:
        return 1

    await tracing.traced_enqueue(_request(), invoke)
    assert not (tmp_path / "multicast.log").exists()
