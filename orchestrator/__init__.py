"""Pipeline orchestration layer."""

from .pipeline import MulticastPipeline, NodeConfig, build_queue_request
from .status import NodeStatus, PipelineState, StatusReporter

__all__ = [
    "MulticastPipeline",
    "NodeConfig",
    "NodeStatus",
    "PipelineState",
    "StatusReporter",
    "build_queue_request",
]
