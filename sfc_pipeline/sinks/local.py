"""Local filesystem artifact sink.

Layout:
    {output_dir}/{artifact.relative_path}

Without an output directory artifacts are written at their own path, next to
the component file they came from.
"""

import asyncio
from pathlib import Path

from sfc_pipeline.documents.artifact import Artifact
from sfc_pipeline.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


class LocalArtifactSink:
    """Writes artifacts to disk in a worker thread."""

    def __init__(self, output_dir: Path | None = None) -> None:
        self._output_dir = output_dir

    @property
    def output_dir(self) -> Path | None:
        return self._output_dir

    async def accept(self, artifact: Artifact) -> None:
        target = self.target_path(artifact)
        await asyncio.to_thread(self._write_sync, target, artifact.content)
        logger.debug(f"Wrote {target} ({artifact.size} bytes)")

    def target_path(self, artifact: Artifact) -> Path:
        """Where ``artifact`` is written; rejects paths escaping the output directory."""
        if self._output_dir is None:
            return Path(artifact.path)
        relative = Path(artifact.relative_path)
        if relative.is_absolute():
            relative = relative.relative_to(relative.anchor)
        target = self._output_dir / relative
        if not target.resolve().is_relative_to(self._output_dir.resolve()):
            raise ValueError(f"Artifact path escapes output directory: {artifact.path!r}")
        return target

    @staticmethod
    def _write_sync(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
