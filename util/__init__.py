"""Hilfsfunktionen fuer Debug-Ausgaben und Tracing."""

from .tracing import log_request_debug, traced_enqueue

__all__ = ["log_request_debug", "traced_enqueue"]
