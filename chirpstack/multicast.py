"""gRPC-Client fuer den `MulticastGroupService` von ChirpStack."""

from __future__ import annotations

import logging
from typing import Any, Optional

import grpc
from chirpstack_api import api

from chirpstack.server import ChirpStackServer
from models.types import QueueRequest
from models.errors import RemoteServiceError

_LOGGER = logging.getLogger(__name__)


def open_channel(server: ChirpStackServer) -> grpc.aio.Channel:
    """Oeffnet den asynchronen Kanal (TLS nur bei `secure=True`)."""

    if server.secure:
        return grpc.aio.secure_channel(server.server, grpc.ssl_channel_credentials())
    return grpc.aio.insecure_channel(server.server)


def build_enqueue_request(request: QueueRequest) -> api.EnqueueMulticastGroupQueueItemRequest:
    """Uebertraegt den `QueueRequest` in die Protobuf-Nachricht.

    Protobuf prueft Feldtypen lokal; ungueltige Werte werden wie eine
    `INVALID_ARGUMENT`-Antwort des Servers gemeldet.
    """

    proto = api.EnqueueMulticastGroupQueueItemRequest()
    try:
        proto.queue_item.multicast_group_id = request.group_id
        proto.queue_item.f_port = request.f_port
        proto.queue_item.data = request.payload
    except (TypeError, ValueError) as exc:
        status = grpc.StatusCode.INVALID_ARGUMENT
        raise RemoteServiceError(str(exc), code=status.value[0], details=status.value[1]) from exc
    return proto


class MulticastClient:
    """Haelt Kanal und Stub; wird einmal pro Pipeline erzeugt und einmal geschlossen.

    Args:
        server: Verbindungsdaten inkl. API-Token.
        channel: Optional vorhandener Kanal (Tests, geteilte Kanaele).
        stub: Optionaler Stub-Ersatz mit `Enqueue`-Coroutine.
    """

    def __init__(
        self,
        server: ChirpStackServer,
        channel: Optional[Any] = None,
        stub: Optional[Any] = None,
    ) -> None:
        self._server = server
        self._channel = channel if channel is not None else open_channel(server)
        self._stub = stub if stub is not None else api.MulticastGroupServiceStub(self._channel)
        self._closed = False

    async def enqueue(self, request: QueueRequest) -> int:
        """Reiht genau einen Queue-Eintrag ein und liefert den fCnt.

        Raises:
            RemoteServiceError: Bei gRPC-Fehlern mit Code und Details des Servers.
        """

        proto = build_enqueue_request(request)
        try:
            response = await self._stub.Enqueue(proto, metadata=self._server.auth_metadata())
        except grpc.aio.AioRpcError as exc:
            code = exc.code()
            raise RemoteServiceError(
                exc.details() or code.value[1],
                code=code.value[0],
                details=exc.details(),
            ) from exc
        return response.f_cnt

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        _LOGGER.info("Schliesse gRPC-Kanal zu %s", self._server.server)
        await self._channel.close()
