"""Structural checks run on a parsed document before anything is compiled."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from sfc_pipeline.exceptions import TooManySectionsError
from sfc_pipeline.parsing import SectionNode
from sfc_pipeline.tags import SINGLE_OCCURRENCE_KINDS, BuiltinKind


@dataclass(frozen=True, slots=True)
class SectionStats:
    """Per-document section counts and the document-wide scoped style flag."""

    counts: dict[str, int]
    has_scoped_style: bool

    def count(self, tag: str) -> int:
        return self.counts.get(tag, 0)


def validate_sections(nodes: Sequence[SectionNode], path: str | None = None) -> SectionStats:
    """Check document shape and compute the scoped style flag.

    Raises:
        TooManySectionsError: More than one template or script section.
    """
    counts = Counter(node.tag for node in nodes)
    for kind in SINGLE_OCCURRENCE_KINDS:
        if counts[kind.value] > 1:
            raise TooManySectionsError(kind.value, counts[kind.value], path)

    has_scoped_style = any(node.tag == BuiltinKind.STYLE and node.scoped for node in nodes)
    return SectionStats(counts=dict(counts), has_scoped_style=has_scoped_style)
