"""Status-Anzeige einer Pipeline-Instanz als kleine Zustandsmaschine.

Zustaende: `idle` -> `sending` -> (`succeeded` | `failed`). Nach `succeeded`
wird nach einer festen Verzoegerung wieder `idle` gesetzt; `failed` bleibt
stehen, bis das naechste Event den Status ueberschreibt."""

from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Callable, Literal, Optional

from pydantic import BaseModel, ConfigDict

_LOGGER = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class NodeStatus(BaseModel):
    """Inhalt des Anzeige-Slots (`fill`, `shape`, `text`)."""

    model_config = ConfigDict(frozen=True)

    state: PipelineState
    fill: Literal["grey", "blue", "green", "red"]
    shape: Literal["ring", "dot"]
    text: str


IDLE_STATUS = NodeStatus(state=PipelineState.IDLE, fill="grey", shape="ring", text="Ready")
SENDING_STATUS = NodeStatus(state=PipelineState.SENDING, fill="blue", shape="dot", text="Sending...")

StatusSink = Callable[[NodeStatus], None]


class StatusReporter:
    """Haelt den aktuellen Status und reicht jede Aenderung an die Anzeige weiter.

    Args:
        sink: Optionaler Callback der Anzeige (z. B. UI oder Log).
        reset_delay: Sekunden bis zum Ruecksprung auf `idle` nach Erfolg.
    """

    def __init__(self, sink: Optional[StatusSink] = None, reset_delay: float = 3.0) -> None:
        self._sink = sink
        self._reset_delay = reset_delay
        self._current = IDLE_STATUS

    @property
    def current(self) -> NodeStatus:
        return self._current

    def _set(self, status: NodeStatus) -> None:
        self._current = status
        _LOGGER.debug("STATUS %s: %s", status.state.value, status.text)
        if self._sink is not None:
            self._sink(status)

    def idle(self) -> None:
        self._set(IDLE_STATUS)

    def sending(self) -> None:
        self._set(SENDING_STATUS)

    def succeeded(self, f_cnt: int) -> None:
        """Setzt `succeeded` und plant den Ruecksprung auf `idle`.

        Der Timer wird nie abgebrochen; ueberlappende Events setzen den
        gemeinsamen Slot einfach erneut zurueck.
        """

        self._set(
            NodeStatus(
                state=PipelineState.SUCCEEDED,
                fill="green",
                shape="dot",
                text=f"Sent (fCnt: {f_cnt})",
            )
        )
        asyncio.get_running_loop().call_later(self._reset_delay, self.idle)

    def failed(self, label: str) -> None:
        self._set(NodeStatus(state=PipelineState.FAILED, fill="red", shape="ring", text=label))


__all__ = [
    "IDLE_STATUS",
    "NodeStatus",
    "PipelineState",
    "SENDING_STATUS",
    "StatusReporter",
    "StatusSink",
]
