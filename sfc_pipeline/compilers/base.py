"""Compiler capabilities used by the dispatch stage.

Built-in section kinds are compiled by a SectionCompiler, one per kind,
bundled in SectionCompilers and injected into the pipeline. Custom kinds are
compiled by the CustomCompiler callables registered in the tag registry.
"""

import inspect
import textwrap
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from sfc_pipeline.compilers.loader import FileLoader
from sfc_pipeline.parsing import SectionNode
from sfc_pipeline.tags import BuiltinKind


@dataclass(frozen=True, slots=True)
class CompiledPart:
    """Compiled content of one section, in document order."""

    tag: str
    content: str
    lang: str | None = None
    extension: str = ""
    index: int = 0


@dataclass(frozen=True, slots=True)
class CompileRequest:
    """Everything a section compiler may need besides the section itself.

    ``source`` is the full document text and ``config`` the opaque compiler
    configuration forwarded from PipelineOptions.
    """

    path: str | None
    scope_id: str
    has_scoped_style: bool
    source: str
    loader: FileLoader
    config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@runtime_checkable
class SectionCompiler(Protocol):
    """Compiler for one built-in section kind."""

    async def compile(self, node: SectionNode, request: CompileRequest) -> str:
        """Compile a section node into its output content."""
        ...


@dataclass(frozen=True, slots=True)
class SectionCompilers:
    """One SectionCompiler per built-in kind."""

    template: SectionCompiler
    script: SectionCompiler
    style: SectionCompiler

    def for_kind(self, kind: BuiltinKind) -> SectionCompiler:
        match kind:
            case BuiltinKind.TEMPLATE:
                return self.template
            case BuiltinKind.SCRIPT:
                return self.script
            case BuiltinKind.STYLE:
                return self.style


async def resolve_maybe_awaitable(value: Any) -> Any:
    """Await ``value`` when a sync-or-async callable returned an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


async def load_section_content(node: SectionNode, request: CompileRequest) -> str:
    """Section body: loaded from ``src`` when set, else the inline text, de-indented."""
    if node.src is not None:
        content = await request.loader.load(node.src, request.path)
    else:
        content = node.content
    return deindent(content)


def deindent(content: str) -> str:
    """Remove the indentation shared by every non-blank line.

    Inline sections are usually indented to match the surrounding markup.
    """
    return textwrap.dedent(content)


SubCompiler = Callable[[str, str | None], str | Awaitable[str]]
"""``(content, path) -> compiled`` registered per language under ``config["compilers"]``."""


def get_sub_compiler(config: Mapping[str, Any], lang: str | None) -> SubCompiler | None:
    if not lang:
        return None
    compilers: Mapping[str, SubCompiler] = config.get("compilers") or {}
    return compilers.get(lang)


async def run_sub_compiler(config: Mapping[str, Any], lang: str | None, content: str, path: str | None) -> str:
    """Run the per-language compiler for ``lang``; content passes through when there is none."""
    compiler = get_sub_compiler(config, lang)
    if compiler is None:
        return content
    result = await resolve_maybe_awaitable(compiler(content, path))
    return ensure_text(result, f"lang=\"{lang}\"")


def ensure_text(result: Any, owner: str) -> str:
    """Return ``result`` when it is a string.

    Raises:
        TypeError: For any other value, e.g. ``None`` from a compiler that
            forgot to return its output.
    """
    if not isinstance(result, str):
        raise TypeError(f"Compiler for {owner} returned {type(result).__name__}, expected str")
    return result
