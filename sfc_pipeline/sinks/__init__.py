"""Downstream sinks receiving emitted artifacts."""

from .local import LocalArtifactSink
from .memory import MemoryArtifactSink
from .protocol import ArtifactSink

__all__ = [
    "ArtifactSink",
    "LocalArtifactSink",
    "MemoryArtifactSink",
]
