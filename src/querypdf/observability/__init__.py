from . import names
from .base import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook, measure
from .progress import NoOpProgressSink, ProgressEvent, ProgressSink

__all__ = [
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "NoOpProgressSink",
    "ProgressEvent",
    "ProgressSink",
    "measure",
    "names",
]
