"""Zentrale Konfiguration (re-exportiert aus `config.settings`)."""

from .settings import (
    CHIRPSTACK_API_TOKEN,
    CHIRPSTACK_SECURE,
    CHIRPSTACK_SERVER,
    LOG_DIR,
    MULTICAST_DEBUG,
    MULTICAST_DEFAULT_F_PORT,
    MULTICAST_F_PORT,
    MULTICAST_GROUP_ID,
    MULTICAST_TRACE_ENABLED,
    STATUS_RESET_DELAY,
)

__all__ = [
    "CHIRPSTACK_API_TOKEN",
    "CHIRPSTACK_SECURE",
    "CHIRPSTACK_SERVER",
    "LOG_DIR",
    "MULTICAST_DEBUG",
    "MULTICAST_DEFAULT_F_PORT",
    "MULTICAST_F_PORT",
    "MULTICAST_GROUP_ID",
    "MULTICAST_TRACE_ENABLED",
    "STATUS_RESET_DELAY",
]
