"""Tests for artifact construction and emission."""

import asyncio

import pytest

from sfc_pipeline.compilers.base import CompiledPart
from sfc_pipeline.documents import SourceDocument
from sfc_pipeline.pipeline import OutputModifiers, merge_parts
from sfc_pipeline.pipeline.emitter import build_artifacts, emit_artifacts
from sfc_pipeline.sinks import MemoryArtifactSink
from sfc_pipeline.tags import TagRegistry

DOCUMENT = SourceDocument(path="src/components/Card.vue", base="src", content="")


def _result(*parts: CompiledPart):
    return merge_parts(parts)


class TestBuildArtifacts:
    def test_one_artifact_per_non_empty_tag(self):
        result = _result(
            CompiledPart("style", "p {}", extension="css", index=2),
            CompiledPart("template", "<p>x</p>", extension="html", index=0),
            CompiledPart("script", "", extension="js", index=1),
        )
        artifacts = build_artifacts(DOCUMENT, result, TagRegistry.build(), OutputModifiers())

        assert [a.path for a in artifacts] == ["src/components/Card.html", "src/components/Card.css"]
        assert [a.tag for a in artifacts] == ["template", "style"]
        assert artifacts[0].content == b"<p>x</p>"
        assert artifacts[0].base == "src"
        assert artifacts[0].relative_path == "components/Card.html"

    def test_emptiness_checked_before_modifier(self):
        result = _result(CompiledPart("script", "", extension="js", index=0))
        modifiers = OutputModifiers({"script": lambda content, lang: "wrapped"})
        assert build_artifacts(DOCUMENT, result, TagRegistry.build(), modifiers) == []

    def test_modifier_output_emitted_verbatim(self):
        result = _result(CompiledPart("style", "p {}", extension="css", index=0))
        modifiers = OutputModifiers({"style": lambda content, lang: ""})
        (artifact,) = build_artifacts(DOCUMENT, result, TagRegistry.build(), modifiers)
        assert artifact.content == b""

    def test_unregistered_tags_not_emitted(self):
        result = _result(CompiledPart("docs", "# Card", extension="md", index=0))
        assert build_artifacts(DOCUMENT, result, TagRegistry.build(), OutputModifiers()) == []

    def test_custom_encoding(self):
        result = _result(CompiledPart("template", "café", extension="html", index=0))
        (artifact,) = build_artifacts(DOCUMENT, result, TagRegistry.build(), OutputModifiers(), encoding="latin-1")
        assert artifact.content == "café".encode("latin-1")


class _SlowSink(MemoryArtifactSink):
    def __init__(self) -> None:
        super().__init__()
        self.pending = 0

    async def accept(self, artifact) -> None:
        self.pending += 1
        await asyncio.sleep(0.01)
        await super().accept(artifact)
        self.pending -= 1


class TestEmitArtifacts:
    @pytest.mark.asyncio
    async def test_waits_for_every_acknowledgement(self):
        result = _result(
            CompiledPart("template", "<p>", extension="html", index=0),
            CompiledPart("style", "p {}", extension="css", index=1),
        )
        artifacts = build_artifacts(DOCUMENT, result, TagRegistry.build(), OutputModifiers())
        sink = _SlowSink()

        await emit_artifacts(artifacts, sink)

        assert sink.pending == 0
        assert len(sink.artifacts) == 2

    @pytest.mark.asyncio
    async def test_nothing_to_emit(self):
        sink = MemoryArtifactSink()
        await emit_artifacts([], sink)
        assert sink.artifacts == []

    @pytest.mark.asyncio
    async def test_sink_failure_propagates(self):
        class FailingSink:
            async def accept(self, artifact):
                raise OSError("disk full")

        result = _result(CompiledPart("template", "<p>", extension="html", index=0))
        artifacts = build_artifacts(DOCUMENT, result, TagRegistry.build(), OutputModifiers())
        with pytest.raises(OSError, match="disk full"):
            await emit_artifacts(artifacts, FailingSink())

    @pytest.mark.asyncio
    async def test_accepted_artifacts_stay_when_another_fails(self):
        class RejectScriptSink(MemoryArtifactSink):
            async def accept(self, artifact):
                if artifact.tag == "script":
                    raise OSError("script rejected")
                await super().accept(artifact)

        result = _result(
            CompiledPart("template", "<p>", extension="html", index=0),
            CompiledPart("script", "x()", extension="js", index=1),
            CompiledPart("style", "p {}", extension="css", index=2),
        )
        artifacts = build_artifacts(DOCUMENT, result, TagRegistry.build(), OutputModifiers())
        sink = RejectScriptSink()

        with pytest.raises(OSError, match="script rejected"):
            await emit_artifacts(artifacts, sink)

        assert sorted(a.name for a in sink.artifacts) == ["Card.css", "Card.html"]
