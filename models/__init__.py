"""Modelldatentypen fuer gemeinsam genutzte Strukturen."""

from .types import ErrorInfo, FailureOutcome, Outcome, QueueRequest, SuccessOutcome

__all__ = [
    "ErrorInfo",
    "FailureOutcome",
    "Outcome",
    "QueueRequest",
    "SuccessOutcome",
]
