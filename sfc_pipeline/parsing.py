"""Top-level section parser for component documents.

Splits a component file into its top-level sections without interpreting
their bodies. Section bodies are opaque text owned by the destination
compiler: every non-template section is read in raw text mode, and template
bodies are only scanned for the ``</template>`` that closes them, so nested
``<template>`` elements are supported.

Template bodies are still tokenized as markup to find that closing tag, so a
bare ``<`` followed by a letter inside one (``{{ a<b }}``) starts a tag that
swallows the ``</template>`` after it, and the document fails with an
unclosed-section ParseError. Write such expressions as ``a < b``.

Example:
    >>> nodes = parse_sections('<template><p>hi</p></template><style scoped>p {}</style>')
    >>> [(n.tag, n.content) for n in nodes]
    [('template', '<p>hi</p>'), ('style', 'p {}')]
"""

import bisect
from dataclasses import dataclass
from html.parser import HTMLParser

from sfc_pipeline.documents import SourceDocument
from sfc_pipeline.exceptions import ParseError

TEMPLATE_TAG = "template"

# Elements that never have a closing tag
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "param", "source", "track", "wbr"}
)


@dataclass(frozen=True, slots=True)
class SectionNode:
    """One top-level section of a component document.

    Offsets index into the parsed source text. ``start``/``end`` cover the
    whole element including its tags, ``content_start``/``content_end`` only
    the body between them.
    """

    tag: str
    attrs: tuple[tuple[str, str | None], ...] = ()
    content: str = ""
    start: int = 0
    end: int = 0
    content_start: int = 0
    content_end: int = 0
    line: int = 1
    column: int = 0

    def attr(self, name: str, default: str | None = None) -> str | None:
        """Value of the first attribute called ``name``; valueless attributes return ``""``."""
        for key, value in self.attrs:
            if key == name:
                return "" if value is None else value
        return default

    def has_attr(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)

    @property
    def lang(self) -> str | None:
        """Language attribute; an empty ``lang=""`` counts as no language."""
        return self.attr("lang") or None

    @property
    def src(self) -> str | None:
        return self.attr("src") or None

    @property
    def scoped(self) -> bool:
        return self.has_attr("scoped")

    @property
    def has_external_source(self) -> bool:
        return self.src is not None

    def raw_content(self, source: str) -> str:
        """Exact source text between the section's opening and closing tags."""
        return source[self.content_start : self.content_end]


@dataclass
class _OpenSection:
    tag: str
    attrs: tuple[tuple[str, str | None], ...]
    start: int
    content_start: int
    line: int
    column: int
    template_depth: int = 1


class _SectionScanner(HTMLParser):
    """Markup tokenizer that only records top-level elements."""

    def __init__(self, source: str, path: str | None = None):
        super().__init__()
        self.source = source
        self.path = path
        self.nodes: list[SectionNode] = []
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(self.source) if ch == "\n"]
        self._open: _OpenSection | None = None

    def _offset(self) -> int:
        line, column = self.getpos()
        return self._line_starts[line - 1] + column

    def _error(self, message: str, offset: int | None = None) -> ParseError:
        if offset is None:
            line, column = self.getpos()
        else:
            line = bisect.bisect_right(self._line_starts, offset)
            column = offset - self._line_starts[line - 1]
        return ParseError(message, self.path, line=line, column=column)

    def handle_starttag(self, tag, attrs):
        if self._open is not None:
            # Inside a template body: only nested templates matter
            if tag == TEMPLATE_TAG:
                self._open.template_depth += 1
            return

        start = self._offset()
        raw = self.get_starttag_text() or ""
        line, column = self.getpos()
        content_start = start + len(raw)
        if tag in VOID_ELEMENTS:
            self._add(tag, tuple(attrs), start, content_start, content_start, content_start, line, column)
            return

        self._open = _OpenSection(tag, tuple(attrs), start, content_start, line, column)
        if tag != TEMPLATE_TAG:
            self.set_cdata_mode(tag)

    def handle_startendtag(self, tag, attrs):
        if self._open is not None:
            return
        start = self._offset()
        end = start + len(self.get_starttag_text() or "")
        line, column = self.getpos()
        self._add(tag, tuple(attrs), start, end, end, end, line, column)

    def handle_endtag(self, tag):
        position = self._offset()
        current = self._open
        if current is None:
            raise self._error(f"Unexpected closing tag </{tag}> at top level")

        if current.tag == TEMPLATE_TAG:
            if tag != TEMPLATE_TAG:
                return
            current.template_depth -= 1
            if current.template_depth:
                return
        elif tag != current.tag:
            raise self._error(f"Closing tag </{tag}> does not match open <{current.tag}>")

        close = self.source.find(">", position)
        end = len(self.source) if close < 0 else close + 1
        self._open = None
        self._add(current.tag, current.attrs, current.start, end, current.content_start, position, current.line, current.column)

    def _add(self, tag, attrs, start, end, content_start, content_end, line, column) -> None:
        self.nodes.append(
            SectionNode(
                tag=tag,
                attrs=attrs,
                content=self.source[content_start:content_end],
                start=start,
                end=end,
                content_start=content_start,
                content_end=content_end,
                line=line,
                column=column,
            )
        )

    def finish(self) -> list[SectionNode]:
        self.feed(self.source)
        self.close()
        if self._open is not None:
            raise self._error(f"Unclosed <{self._open.tag}> section", self._open.start)
        return self.nodes


def parse_sections(content: str, path: str | None = None) -> list[SectionNode]:
    """Parse a component document into its top-level sections, in document order.

    Top-level text, comments and processing instructions are ignored.

    Raises:
        ParseError: When a top-level element is left open, or a closing tag
            does not match the element it closes.
    """
    return _SectionScanner(source=content, path=path).finish()


async def parse_document(document: SourceDocument) -> tuple[str, list[SectionNode]]:
    """Decode and parse a document, returning its text and sections."""
    text = document.text
    return text, parse_sections(text, document.path)
