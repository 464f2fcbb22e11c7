"""In-memory artifact sink for testing and embedding hosts."""

from sfc_pipeline.documents.artifact import Artifact


class MemoryArtifactSink:
    """List-backed sink keeping artifacts in acceptance order.

    Not for production use: everything is lost when the process exits.
    """

    def __init__(self) -> None:
        self._artifacts: list[Artifact] = []

    async def accept(self, artifact: Artifact) -> None:
        self._artifacts.append(artifact)

    @property
    def artifacts(self) -> list[Artifact]:
        return list(self._artifacts)

    def by_path(self) -> dict[str, Artifact]:
        """Artifacts keyed by output path; later artifacts win on collisions."""
        return {artifact.path: artifact for artifact in self._artifacts}

    def clear(self) -> None:
        self._artifacts.clear()
