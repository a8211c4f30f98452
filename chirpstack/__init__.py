"""ChirpStack-Anbindung: Verbindungsdaten und Multicast-Client."""

from .multicast import MulticastClient, build_enqueue_request, open_channel
from .server import ChirpStackServer

__all__ = [
    "ChirpStackServer",
    "MulticastClient",
    "build_enqueue_request",
    "open_channel",
]
