"""Section kinds and the tag registry.

The registry maps a section tag name to the function that decides the output
extension of that section. It always knows the three built-in kinds and can
be extended with custom kinds, each of which needs a resolver and a custom
compiler. Only tags present in the registry are ever compiled and emitted.

Built-in resolvers:
    template: ``lang`` when present, else ``html``
    script:   ``js``
    style:    ``css``

Example:
    >>> registry = TagRegistry.build(
    ...     tags={"config": lambda lang, path, node: "config.php" if lang == "php" else "ini"},
    ...     custom_compilers={"config": lambda tag, content, lang, path: "<?php\\n" + content},
    ... )
    >>> registry.names
    ('template', 'script', 'style', 'config')
"""

from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Union

from sfc_pipeline.exceptions import ConfigurationError
from sfc_pipeline.logging import get_pipeline_logger
from sfc_pipeline.parsing import SectionNode
from sfc_pipeline.settings import settings

logger = get_pipeline_logger(__name__)

ExtensionResolver = Callable[[str | None, str | None, SectionNode], str | None]
"""``(lang, path, node) -> extension`` for one section of a document."""

CustomCompiler = Callable[[str, str, str | None, str | None], Union[str, Awaitable[str]]]
"""``(tag, content, lang, path) -> compiled`` for a custom section kind, sync or async."""


class BuiltinKind(StrEnum):
    """Section kinds compiled by the injected section compilers."""

    TEMPLATE = "template"
    SCRIPT = "script"
    STYLE = "style"


@dataclass(frozen=True, slots=True)
class CustomKind:
    """User-defined section kind, compiled by its registered custom compiler."""

    name: str

    def __str__(self) -> str:
        return self.name


SectionKind = BuiltinKind | CustomKind

SINGLE_OCCURRENCE_KINDS = (BuiltinKind.TEMPLATE, BuiltinKind.SCRIPT)


def section_kind(tag: str) -> SectionKind:
    """Map a tag name to its section kind."""
    try:
        return BuiltinKind(tag)
    except ValueError:
        return CustomKind(tag)


def _template_extension(lang: str | None, path: str | None, node: SectionNode) -> str:
    return lang or "html"


def _script_extension(lang: str | None, path: str | None, node: SectionNode) -> str:
    return "js"


def _style_extension(lang: str | None, path: str | None, node: SectionNode) -> str:
    return "css"


BUILTIN_RESOLVERS: Mapping[BuiltinKind, ExtensionResolver] = MappingProxyType(
    {
        BuiltinKind.TEMPLATE: _template_extension,
        BuiltinKind.SCRIPT: _script_extension,
        BuiltinKind.STYLE: _style_extension,
    }
)


@dataclass(frozen=True, slots=True)
class TagDescriptor:
    """Registered section kind: resolver plus, for custom kinds, its compiler."""

    name: str
    kind: SectionKind
    resolver: ExtensionResolver
    compiler: CustomCompiler | None = None

    @property
    def is_builtin(self) -> bool:
        return isinstance(self.kind, BuiltinKind)


class TagRegistry(Mapping[str, TagDescriptor]):
    """Read-only mapping of tag name to TagDescriptor.

    Built once per pipeline and shared by every document the pipeline
    processes. Iteration yields built-ins first, then custom kinds in
    registration order.
    """

    def __init__(self, descriptors: Mapping[str, TagDescriptor]):
        self._descriptors: Mapping[str, TagDescriptor] = MappingProxyType(dict(descriptors))

    @classmethod
    def build(
        cls,
        tags: Mapping[str, ExtensionResolver] | None = None,
        custom_compilers: Mapping[str, CustomCompiler] | None = None,
    ) -> "TagRegistry":
        """Merge caller resolvers and custom compilers over the built-ins.

        Custom kinds missing either a resolver or a compiler are left out of
        the registry with a warning, so their sections are never processed.
        """
        tags = dict(tags or {})
        custom_compilers = dict(custom_compilers or {})

        descriptors: dict[str, TagDescriptor] = {}
        for kind, default in BUILTIN_RESOLVERS.items():
            descriptors[kind.value] = TagDescriptor(kind.value, kind, tags.pop(kind.value, default))

        for name in list(custom_compilers):
            if name in descriptors:
                logger.warning(f"Ignoring custom compiler for built-in section <{name}>")
                custom_compilers.pop(name)

        for name, resolver in tags.items():
            compiler = custom_compilers.pop(name, None)
            if compiler is None:
                logger.warning(f"Tag <{name}> has no custom compiler registered; its sections will be skipped")
                continue
            descriptors[name] = TagDescriptor(name, CustomKind(name), resolver, compiler)

        for name in custom_compilers:
            logger.warning(f"Custom compiler for <{name}> has no extension resolver in tags; its sections will be skipped")

        return cls(descriptors)

    def __getitem__(self, name: str) -> TagDescriptor:
        return self._descriptors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._descriptors)

    def resolve_extension(self, tag: str, lang: str | None, path: str | None, node: SectionNode) -> str:
        """Output extension for one section, falling back to the default extension.

        A resolver returning an empty value, or raising ConfigurationError,
        yields ``settings.fallback_extension`` instead of failing the document.
        """
        descriptor = self[tag]
        try:
            extension = descriptor.resolver(lang, path, node)
        except ConfigurationError as e:
            logger.warning(f"Extension resolver for <{tag}> failed: {e}; using .{settings.fallback_extension}")
            return settings.fallback_extension
        if not extension:
            logger.warning(f"Extension resolver for <{tag}> returned nothing; using .{settings.fallback_extension}")
            return settings.fallback_extension
        return str(extension)
