"""Grouping of compiled parts into one content string per tag."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sfc_pipeline.compilers.base import CompiledPart

PART_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class MergedSection:
    """Merged content of every section of one tag.

    ``lang`` and ``extension`` are those of the last section of the tag in
    document order.
    """

    tag: str
    content: str
    lang: str | None
    extension: str
    count: int = 1


class ResultSet(Mapping[str, MergedSection]):
    """Per-document mapping of tag to merged content.

    A tag without any section in the document is absent, which is different
    from a tag whose sections compiled to an empty string.
    """

    def __init__(self, sections: Mapping[str, MergedSection] | None = None) -> None:
        self._sections: Mapping[str, MergedSection] = MappingProxyType(dict(sections or {}))

    def __getitem__(self, tag: str) -> MergedSection:
        return self._sections[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def content(self, tag: str) -> str | None:
        """Merged content of ``tag``, None when the document had no such section."""
        section = self._sections.get(tag)
        return section.content if section is not None else None


def merge_parts(parts: Iterable[CompiledPart]) -> ResultSet:
    """Concatenate same-tag parts in document order.

    Multiple ``<style>`` sections become one stylesheet this way.
    """
    grouped: dict[str, list[CompiledPart]] = {}
    for part in sorted(parts, key=lambda p: p.index):
        grouped.setdefault(part.tag, []).append(part)

    merged = {}
    for tag, tag_parts in grouped.items():
        last = tag_parts[-1]
        merged[tag] = MergedSection(
            tag=tag,
            content=PART_SEPARATOR.join(part.content for part in tag_parts),
            lang=last.lang,
            extension=last.extension,
            count=len(tag_parts),
        )
    return ResultSet(merged)
