"""Downstream sink protocol.

The pipeline hands every artifact to an ArtifactSink and treats the artifact
as delivered only once ``accept`` has returned.
"""

from typing import Protocol, runtime_checkable

from sfc_pipeline.documents.artifact import Artifact


@runtime_checkable
class ArtifactSink(Protocol):
    """Consumer of emitted artifacts.

    Implementations: LocalArtifactSink (writes files), MemoryArtifactSink (testing).
    """

    async def accept(self, artifact: Artifact) -> None:
        """Take ownership of one artifact. Returning acknowledges it."""
        ...
