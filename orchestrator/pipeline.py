"""Asynchrone Pipeline fuer Multicast-Downlinks ueber ChirpStack.

Pro Nachricht: Parameter aufloesen, Nutzdaten normalisieren, Request bauen,
genau einmal senden, Ergebnis an die Nachricht haengen und weiterreichen."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, MutableMapping, Optional

from chirpstack.multicast import MulticastClient
from chirpstack.server import ChirpStackServer
from config import (
    MULTICAST_DEBUG,
    MULTICAST_DEFAULT_F_PORT,
    MULTICAST_F_PORT,
    MULTICAST_GROUP_ID,
    STATUS_RESET_DELAY,
)
from guards.parameters import DEFAULT_F_PORT, resolve_f_port, resolve_group_id
from guards.payload import normalize_payload
from models.errors import ConfigurationError, MulticastError, RemoteServiceError
from models.types import ErrorInfo, FailureOutcome, QueueRequest, SuccessOutcome
from orchestrator.status import StatusReporter, StatusSink
from util.tracing import log_request_debug, traced_enqueue

_LOGGER = logging.getLogger(__name__)

Message = MutableMapping[str, Any]
Emitter = Callable[[Message], None]
ClientFactory = Callable[[ChirpStackServer], MulticastClient]


@dataclass
class NodeConfig:
    """Statische Parameter einer Pipeline-Instanz."""

    multicast_group_id: Any = None
    f_port: Any = None
    default_f_port: int = DEFAULT_F_PORT
    status_reset_delay: float = 3.0
    debug: bool = False

    @classmethod
    def from_settings(cls) -> "NodeConfig":
        return cls(
            multicast_group_id=MULTICAST_GROUP_ID,
            f_port=MULTICAST_F_PORT,
            default_f_port=MULTICAST_DEFAULT_F_PORT,
            status_reset_delay=STATUS_RESET_DELAY,
            debug=MULTICAST_DEBUG,
        )


def build_queue_request(group_id: Any, f_port: Any, payload: bytes) -> QueueRequest:
    """Setzt den Queue-Eintrag aus bereits aufgeloesten Werten zusammen."""

    return QueueRequest(group_id=group_id, f_port=f_port, payload=payload)


class MulticastPipeline:
    """Verarbeitet eingehende Nachrichten und reiht Multicast-Downlinks ein.

    Der gRPC-Kanal wird beim Erzeugen geoeffnet und in `close()` genau einmal
    geschlossen. Fehlt die Serverkonfiguration, bleibt die Instanz inaktiv und
    verarbeitet keine Nachrichten.

    Args:
        server: Verbindungsdaten; `None` gilt als fehlende Konfiguration.
        node_config: Statische Node-Parameter.
        emit: Optionaler Callback fuer die ausgehende Nachricht.
        status_sink: Optionaler Callback der Statusanzeige.
        client_factory: Erzeugt den Multicast-Client (Tests ersetzen ihn).
    """

    def __init__(
        self,
        server: Optional[ChirpStackServer],
        node_config: Optional[NodeConfig] = None,
        *,
        emit: Optional[Emitter] = None,
        status_sink: Optional[StatusSink] = None,
        client_factory: ClientFactory = MulticastClient,
    ) -> None:
        self.config = node_config or NodeConfig()
        self.status = StatusReporter(status_sink, self.config.status_reset_delay)
        self.config_error: Optional[ConfigurationError] = None
        self._emit = emit
        self._client: Optional[MulticastClient] = None
        self._closed = False

        try:
            if server is None:
                raise ConfigurationError("Serverkonfiguration fehlt")
            server.validate_config()
        except ConfigurationError as error:
            self.config_error = error
            _LOGGER.error("Multicast-Pipeline nicht initialisiert: %s", error.message)
            return

        self._client = client_factory(server)
        self.status.idle()

    @property
    def ready(self) -> bool:
        return self._client is not None and not self._closed

    async def handle(self, msg: Message) -> Optional[Message]:
        """Verarbeitet eine Nachricht und liefert sie mit angehaengtem Ergebnis.

        Returns:
            Die weitergereichte Nachricht oder `None`, wenn die Pipeline nicht
            initialisiert ist.
        """

        if not self.ready:
            _LOGGER.warning("Nachricht verworfen: Pipeline ist nicht bereit")
            return None

        try:
            request = self._prepare(msg)
        except MulticastError as error:
            return self._fail(msg, error)

        if self.config.debug:
            log_request_debug(request)

        self.status.sending()
        client = self._client
        try:
            f_cnt = await traced_enqueue(request, lambda: client.enqueue(request))
        except RemoteServiceError as error:
            return self._fail(msg, error)
        except Exception as exc:
            error = RemoteServiceError(str(exc), details=type(exc).__name__)
            error.__cause__ = exc
            return self._fail(msg, error)

        outcome = SuccessOutcome(
            f_cnt=f_cnt,
            multicast_group_id=request.group_id,
            f_port=request.f_port,
        )
        _LOGGER.info(
            "Multicast eingereiht: Gruppe %s, fPort %s, fCnt %s",
            request.group_id,
            request.f_port,
            f_cnt,
        )
        self.status.succeeded(f_cnt)
        msg["payload"] = outcome.to_payload()
        return self._forward(msg)

    def _prepare(self, msg: Message) -> QueueRequest:
        group_id = resolve_group_id(self.config.multicast_group_id, msg)
        f_port = resolve_f_port(self.config.f_port, msg, self.config.default_f_port)
        payload = normalize_payload(msg.get("payload"))
        return build_queue_request(group_id, f_port, payload)

    def _fail(self, msg: Message, error: MulticastError) -> Message:
        _LOGGER.error("Multicast fehlgeschlagen [%s]: %s", error.code, error.message)
        self.status.failed(error.short_label)
        outcome = FailureOutcome(
            error=ErrorInfo(message=error.message, code=error.code, details=error.details)
        )
        msg["payload"] = outcome.to_payload()
        msg["error"] = outcome.error.model_dump()
        return self._forward(msg)

    def _forward(self, msg: Message) -> Message:
        if self._emit is not None:
            self._emit(msg)
        return msg

    async def close(self) -> None:
        """Gibt den gRPC-Kanal frei; weitere Aufrufe sind wirkungslos."""

        if self._closed:
            return
        self._closed = True
        if self._client is not None:
            await self._client.close()
