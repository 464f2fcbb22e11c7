"""Artifact construction and acknowledged hand-off to the downstream sink."""

import asyncio
from collections.abc import Sequence

from sfc_pipeline.documents import Artifact, SourceDocument, output_path
from sfc_pipeline.pipeline.merge import ResultSet
from sfc_pipeline.pipeline.modifiers import OutputModifiers
from sfc_pipeline.settings import settings
from sfc_pipeline.sinks.protocol import ArtifactSink
from sfc_pipeline.tags import TagRegistry


def build_artifacts(
    document: SourceDocument,
    result: ResultSet,
    registry: TagRegistry,
    modifiers: OutputModifiers,
    encoding: str | None = None,
) -> list[Artifact]:
    """Build one artifact per registered tag with non-empty merged content.

    Tags are visited in registry order. Empty or absent content produces no
    artifact; otherwise the output modifier's return value is emitted as is.
    """
    encoding = encoding or settings.output_encoding
    artifacts: list[Artifact] = []
    for tag in registry:
        section = result.get(tag)
        if section is None or not section.content:
            continue
        content = modifiers.apply(tag, section.content, section.lang)
        artifacts.append(
            Artifact(
                path=output_path(document.directory, document.stem, section.extension),
                base=document.base,
                tag=tag,
                extension=section.extension,
                content=content.encode(encoding),
            )
        )
    return artifacts


async def emit_artifacts(artifacts: Sequence[Artifact], sink: ArtifactSink) -> None:
    """Hand every artifact to ``sink`` and wait until all of them are accepted.

    Returns immediately for an empty sequence. The caller may only consider
    the document done once this returns.

    Artifacts are only built once every section has compiled, so a compile
    failure never reaches the sink. Delivery itself is not transactional:
    all ``accept`` calls run concurrently and, when one of them raises, the
    artifacts the sink already accepted stay with the sink. Sinks that need
    all-or-nothing output must stage and commit on their own.
    """
    if not artifacts:
        return
    await asyncio.gather(*[sink.accept(artifact) for artifact in artifacts])
