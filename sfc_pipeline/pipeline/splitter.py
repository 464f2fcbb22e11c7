"""ComponentPipeline: split component documents into per-section artifacts.

Flow for one document:
    parse -> validate -> resolve (DocumentContext) -> dispatch -> merge
    -> modify -> build artifacts -> emit (wait for every acknowledgement)

Failures are local to the document that caused them: ``process`` and ``run``
report them and carry on with the next document. A document that fails
to compile never emits anything because its artifacts are only built once
every section has compiled. A sink failure marks the document FAILED, but
artifacts the sink accepted before it are not withdrawn.

Example:
    >>> pipeline = ComponentPipeline(PipelineOptions())
    >>> sink = MemoryArtifactSink()
    >>> report = await pipeline.run([SourceDocument(path="Button.vue", content=text)], sink)
    >>> [artifact.name for artifact in sink.artifacts]
    ['Button.html', 'Button.js', 'Button.css']
"""

import asyncio
from collections.abc import AsyncIterable, AsyncIterator, Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from sfc_pipeline.compilers.base import SectionCompilers
from sfc_pipeline.compilers.builtin import default_section_compilers
from sfc_pipeline.compilers.loader import FileLoader, LocalFileLoader
from sfc_pipeline.documents import Artifact, SourceDocument
from sfc_pipeline.exceptions import CompileError, DocumentError, UnsupportedInputError
from sfc_pipeline.logging import get_pipeline_logger
from sfc_pipeline.parsing import parse_document
from sfc_pipeline.pipeline.context import DocumentContext
from sfc_pipeline.pipeline.dispatch import dispatch_sections
from sfc_pipeline.pipeline.emitter import build_artifacts, emit_artifacts
from sfc_pipeline.pipeline.merge import ResultSet, merge_parts
from sfc_pipeline.pipeline.modifiers import OutputModifiers
from sfc_pipeline.pipeline.options import PipelineOptions
from sfc_pipeline.settings import settings
from sfc_pipeline.sinks.protocol import ArtifactSink
from sfc_pipeline.tags import TagRegistry
from sfc_pipeline.validation import validate_sections

logger = get_pipeline_logger(__name__)


class DocumentStatus(StrEnum):
    """Final state of one processed document."""

    EMITTED = "emitted"
    EMPTY = "empty"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DocumentOutcome:
    path: str | None
    status: DocumentStatus
    artifacts: tuple[Artifact, ...] = ()
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status is not DocumentStatus.FAILED


@dataclass
class PipelineReport:
    """Outcomes of a pipeline run, in input order."""

    outcomes: list[DocumentOutcome] = field(default_factory=list)

    @property
    def artifacts(self) -> list[Artifact]:
        return [artifact for outcome in self.outcomes for artifact in outcome.artifacts]

    @property
    def failed(self) -> list[DocumentOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is DocumentStatus.FAILED]

    @property
    def skipped(self) -> list[DocumentOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is DocumentStatus.SKIPPED]

    @property
    def ok(self) -> bool:
        return not self.failed


async def _iterate(documents: Iterable[SourceDocument] | AsyncIterable[SourceDocument]) -> AsyncIterator[SourceDocument]:
    if isinstance(documents, AsyncIterable):
        async for document in documents:
            yield document
    else:
        for document in documents:
            yield document


class ComponentPipeline:
    """Splits component documents into one artifact per section kind.

    The tag registry, modifiers and compilers are fixed at construction and
    shared read-only by every document; all per-document state lives in a
    DocumentContext created for that document alone.

    Args:
        options: Tags, custom compilers, output modifiers and the opaque
            configuration for the section compilers.
        compilers: Compilers for the built-in kinds. Defaults to the
            pass-through compilers of ``sfc_pipeline.compilers.builtin``.
        loader: Loader for ``src`` references. Defaults to LocalFileLoader.
    """

    def __init__(
        self,
        options: PipelineOptions | None = None,
        *,
        compilers: SectionCompilers | None = None,
        loader: FileLoader | None = None,
    ) -> None:
        self.options = options or PipelineOptions()
        self.registry = TagRegistry.build(self.options.tags, self.options.custom_compilers)
        self.modifiers = OutputModifiers(self.options.output_modifiers)
        self.compilers = compilers or default_section_compilers()
        self.loader = loader or LocalFileLoader()

    async def prepare(self, document: SourceDocument) -> DocumentContext:
        """Parse and validate a document, resolving every registered section."""
        source, nodes = await parse_document(document)
        stats = validate_sections(nodes, document.path)
        return DocumentContext.create(document, source, nodes, stats, self.registry)

    async def compile(self, document: SourceDocument) -> ResultSet:
        """Compile a document into its merged per-tag results."""
        context = await self.prepare(document)
        parts = await dispatch_sections(
            context,
            self.compilers,
            self.registry,
            self.loader,
            self.options.compiler_config,
        )
        return merge_parts(parts)

    async def split(self, document: SourceDocument) -> list[Artifact]:
        """Compile a document and build its artifacts without emitting them."""
        result = await self.compile(document)
        return build_artifacts(document, result, self.registry, self.modifiers)

    async def _split_or_report(self, document: SourceDocument) -> DocumentOutcome | list[Artifact]:
        if document.is_null:
            logger.debug(f"Skipping {document.display_path}: no contents")
            return DocumentOutcome(document.path, DocumentStatus.SKIPPED)
        try:
            return await self.split(document)
        except UnsupportedInputError as e:
            logger.warning(f"Skipping {document.display_path}: {e}")
            return DocumentOutcome(document.path, DocumentStatus.SKIPPED, error=e)
        except CompileError as e:
            logger.error(str(e))
            return DocumentOutcome(document.path, DocumentStatus.FAILED, error=e)
        except DocumentError as e:
            logger.error(f"In file {document.display_path}:\n{e}")
            return DocumentOutcome(document.path, DocumentStatus.FAILED, error=e)
        except Exception as e:
            error = CompileError(f"In file {document.display_path}:\n{e}", document.path)
            error.__cause__ = e
            logger.error(str(error))
            return DocumentOutcome(document.path, DocumentStatus.FAILED, error=error)

    async def process(self, document: SourceDocument, sink: ArtifactSink) -> DocumentOutcome:
        """Split one document and deliver its artifacts to ``sink``.

        Returns once every artifact has been accepted by the sink, or right
        away when the document produced none. Never raises for per-document
        failures; they are logged and returned as FAILED or SKIPPED outcomes.
        """
        result = await self._split_or_report(document)
        if isinstance(result, DocumentOutcome):
            return result
        if not result:
            logger.info(f"{document.display_path}: no sections to emit")
            return DocumentOutcome(document.path, DocumentStatus.EMPTY)

        try:
            await emit_artifacts(result, sink)
        except Exception as e:
            logger.error(f"In file {document.display_path}: delivering artifacts failed: {e}")
            return DocumentOutcome(document.path, DocumentStatus.FAILED, error=e)

        logger.info(f"{document.display_path}: emitted {', '.join(a.name for a in result)}")
        return DocumentOutcome(document.path, DocumentStatus.EMITTED, artifacts=tuple(result))

    async def run(
        self,
        documents: Iterable[SourceDocument] | AsyncIterable[SourceDocument],
        sink: ArtifactSink,
        *,
        max_concurrent_documents: int | None = None,
    ) -> PipelineReport:
        """Process every document, at most ``max_concurrent_documents`` at a time.

        No ordering is guaranteed between artifacts of different documents;
        the report lists outcomes in input order.
        """
        limit = max_concurrent_documents or settings.max_concurrent_documents
        semaphore = asyncio.Semaphore(limit)

        async def _process(document: SourceDocument) -> DocumentOutcome:
            async with semaphore:
                return await self.process(document, sink)

        tasks: list[asyncio.Task[DocumentOutcome]] = []
        async for document in _iterate(documents):
            tasks.append(asyncio.create_task(_process(document)))
        outcomes = await asyncio.gather(*tasks)

        report = PipelineReport(outcomes=list(outcomes))
        if report.failed:
            logger.warning(f"{len(report.failed)} of {len(report.outcomes)} documents failed")
        return report

    async def stream(
        self,
        documents: Iterable[SourceDocument] | AsyncIterable[SourceDocument],
    ) -> AsyncIterator[Artifact]:
        """Yield artifacts document by document.

        The generator moves on to the next document only after the consumer
        has taken every artifact of the current one. Failed and skipped
        documents are logged and yield nothing.
        """
        async for document in _iterate(documents):
            result = await self._split_or_report(document)
            if isinstance(result, DocumentOutcome):
                continue
            for artifact in result:
                yield artifact
