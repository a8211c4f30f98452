"""Unit-Tests fuer die Statusanzeige."""

from __future__ import annotations

import asyncio

import pytest

from orchestrator.status import IDLE_STATUS, NodeStatus, PipelineState, StatusReporter


def test_initial_state_is_idle() -> None:
    reporter = StatusReporter()
    assert reporter.current == IDLE_STATUS
    assert reporter.current.fill == "grey"


def test_sending_and_failed_labels() -> None:
    seen: list[NodeStatus] = []
    reporter = StatusReporter(seen.append)

    reporter.sending()
    reporter.failed("Error: 14")

    assert [status.state for status in seen] == [PipelineState.SENDING, PipelineState.FAILED]
    assert seen[0].fill == "blue"
    assert seen[1].fill == "red"
    assert seen[1].text == "Error: 14"


@pytest.mark.asyncio
async def test_succeeded_resets_to_idle_after_delay() -> None:
    seen: list[NodeStatus] = []
    reporter = StatusReporter(seen.append, reset_delay=0.01)

    reporter.succeeded(7)
    assert reporter.current.state is PipelineState.SUCCEEDED
    assert reporter.current.text == "Sent (fCnt: 7)"

    await asyncio.sleep(0.05)
    assert reporter.current == IDLE_STATUS
    assert [status.state for status in seen] == [PipelineState.SUCCEEDED, PipelineState.IDLE]


@pytest.mark.asyncio
async def test_failed_stays_until_overwritten() -> None:
    reporter = StatusReporter(reset_delay=0.01)

    reporter.failed("Invalid format")
    await asyncio.sleep(0.03)

    assert reporter.current.state is PipelineState.FAILED
