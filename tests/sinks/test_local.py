"""Tests for LocalArtifactSink."""

from pathlib import Path

import pytest

from sfc_pipeline.documents import Artifact, SourceDocument
from sfc_pipeline.pipeline import ComponentPipeline, DocumentStatus
from sfc_pipeline.sinks import ArtifactSink, LocalArtifactSink
from tests.support.helpers import BUTTON_COMPONENT


class TestLocalArtifactSink:
    @pytest.mark.asyncio
    async def test_writes_relative_to_output_dir(self, tmp_path: Path):
        artifact = Artifact(path="src/ui/Card.css", base="src", tag="style", extension="css", content=b"p {}")
        sink = LocalArtifactSink(tmp_path / "dist")

        await sink.accept(artifact)

        assert (tmp_path / "dist" / "ui" / "Card.css").read_bytes() == b"p {}"

    @pytest.mark.asyncio
    async def test_writes_in_place_without_output_dir(self, tmp_path: Path):
        target = tmp_path / "Card.js"
        await LocalArtifactSink().accept(Artifact(path=str(target), tag="script", extension="js", content=b"x"))
        assert target.read_bytes() == b"x"

    def test_rejects_escaping_paths(self, tmp_path: Path):
        artifact = Artifact(path="../outside.css", tag="style", extension="css", content=b"")
        with pytest.raises(ValueError, match="escapes output directory"):
            LocalArtifactSink(tmp_path).target_path(artifact)

    def test_absolute_path_kept_under_output_dir(self, tmp_path: Path):
        artifact = Artifact(path="/abs/Card.css", tag="style", extension="css", content=b"")
        assert LocalArtifactSink(tmp_path).target_path(artifact) == tmp_path / "abs" / "Card.css"

    def test_satisfies_protocol(self):
        assert isinstance(LocalArtifactSink(), ArtifactSink)


class TestLocalRoundTrip:
    @pytest.mark.asyncio
    async def test_component_files_written_next_to_source(self, tmp_path: Path):
        component = tmp_path / "components" / "Button.vue"
        component.parent.mkdir()
        component.write_text(BUTTON_COMPONENT)
        document = await SourceDocument.from_path(component, base=tmp_path)

        report = await ComponentPipeline().run([document], LocalArtifactSink(tmp_path / "dist"))

        assert report.outcomes[0].status is DocumentStatus.EMITTED
        written = sorted(p.relative_to(tmp_path / "dist").as_posix() for p in (tmp_path / "dist").rglob("*.*"))
        assert written == ["components/Button.css", "components/Button.html", "components/Button.js"]
