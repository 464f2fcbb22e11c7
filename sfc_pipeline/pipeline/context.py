"""Per-document working state.

A DocumentContext is created fresh for every document and threaded through
parse, validation, dispatch and merge. Nothing in it is ever stored on the
pipeline, so documents processed concurrently by the same pipeline cannot
see each other's resolved extensions or languages.
"""

from dataclasses import dataclass, field

from sfc_pipeline.documents import SourceDocument
from sfc_pipeline.parsing import SectionNode
from sfc_pipeline.tags import SectionKind, TagRegistry
from sfc_pipeline.validation import SectionStats


@dataclass(frozen=True, slots=True)
class ResolvedSection:
    """A section node with its kind, language and output extension resolved."""

    node: SectionNode
    kind: SectionKind
    lang: str | None
    extension: str
    index: int

    @property
    def tag(self) -> str:
        return self.node.tag


@dataclass(frozen=True)
class DocumentContext:
    """Everything known about one document while it is being compiled."""

    document: SourceDocument
    source: str
    scope_id: str
    nodes: tuple[SectionNode, ...]
    stats: SectionStats
    sections: tuple[ResolvedSection, ...] = field(default=())

    @property
    def path(self) -> str | None:
        return self.document.path

    @property
    def has_scoped_style(self) -> bool:
        return self.stats.has_scoped_style

    @classmethod
    def create(
        cls,
        document: SourceDocument,
        source: str,
        nodes: list[SectionNode],
        stats: SectionStats,
        registry: TagRegistry,
    ) -> "DocumentContext":
        """Resolve language and extension for every registered section.

        Sections whose tag is not in the registry are dropped here and never
        reach a compiler.
        """
        sections = tuple(
            ResolvedSection(
                node=node,
                kind=registry[node.tag].kind,
                lang=node.lang,
                extension=registry.resolve_extension(node.tag, node.lang, document.path, node),
                index=index,
            )
            for index, node in enumerate(nodes)
            if node.tag in registry
        )
        return cls(
            document=document,
            source=source,
            scope_id=document.scope_id(source),
            nodes=tuple(nodes),
            stats=stats,
            sections=sections,
        )
