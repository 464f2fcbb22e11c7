"""Concurrent compilation of a document's sections.

One task per registered section runs under asyncio.gather. The first failure
is re-raised as a CompileError naming the document; sibling compiles are not
cancelled (compilers are assumed side-effect free) and their results are
dropped with the failed document.
"""

import asyncio
from collections.abc import Mapping
from typing import Any

from sfc_pipeline.compilers.base import (
    CompiledPart,
    CompileRequest,
    SectionCompilers,
    ensure_text,
    load_section_content,
    resolve_maybe_awaitable,
)
from sfc_pipeline.compilers.loader import FileLoader
from sfc_pipeline.exceptions import CompileError
from sfc_pipeline.logging import get_pipeline_logger
from sfc_pipeline.pipeline.context import DocumentContext, ResolvedSection
from sfc_pipeline.tags import BuiltinKind, TagRegistry

logger = get_pipeline_logger(__name__)


async def compile_section(
    section: ResolvedSection,
    request: CompileRequest,
    compilers: SectionCompilers,
    registry: TagRegistry,
) -> CompiledPart:
    """Compile one section with its built-in or custom compiler."""
    if isinstance(section.kind, BuiltinKind):
        content = await compilers.for_kind(section.kind).compile(section.node, request)
    else:
        custom = registry[section.tag].compiler
        if custom is None:
            raise CompileError(f"No custom compiler registered for <{section.tag}>", request.path)
        source = await load_section_content(section.node, request)
        content = await resolve_maybe_awaitable(custom(section.tag, source, section.lang, request.path))
    return CompiledPart(
        tag=section.tag,
        content=ensure_text(content, f"<{section.tag}>"),
        lang=section.lang,
        extension=section.extension,
        index=section.index,
    )


async def dispatch_sections(
    context: DocumentContext,
    compilers: SectionCompilers,
    registry: TagRegistry,
    loader: FileLoader,
    config: Mapping[str, Any],
) -> list[CompiledPart]:
    """Compile every registered section of a document concurrently.

    Returns:
        Compiled parts in document order.

    Raises:
        CompileError: The first section compile that failed, prefixed with
            the document path and chained to the original exception.
    """
    skipped = [node.tag for node in context.nodes if node.tag not in registry]
    if skipped:
        logger.debug(f"Skipping unregistered sections in {context.document.display_path}: {', '.join(skipped)}")

    request = CompileRequest(
        path=context.path,
        scope_id=context.scope_id,
        has_scoped_style=context.has_scoped_style,
        source=context.source,
        loader=loader,
        config=config,
    )
    try:
        parts = await asyncio.gather(
            *[compile_section(section, request, compilers, registry) for section in context.sections]
        )
    except Exception as e:
        raise CompileError(f"In file {context.document.display_path}:\n{e}", context.path) from e
    return list(parts)
