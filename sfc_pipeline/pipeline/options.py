"""Pipeline configuration supplied once at construction."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sfc_pipeline.pipeline.modifiers import OutputModifier
from sfc_pipeline.tags import CustomCompiler, ExtensionResolver


class PipelineOptions(BaseModel):
    """Options for a ComponentPipeline.

    ``tags``, ``custom_compilers`` and ``output_modifiers`` configure the
    pipeline itself. Every other keyword is kept verbatim in
    ``compiler_config`` and forwarded to the section compilers without being
    inspected, e.g. ``compilers={"scss": compile_scss}`` for the default ones.

    Example:
        >>> options = PipelineOptions(
        ...     tags={"docs": lambda lang, path, node: "md"},
        ...     custom_compilers={"docs": lambda tag, content, lang, path: content},
        ...     compilers={"scss": compile_scss},
        ... )
        >>> sorted(options.compiler_config)
        ['compilers']
    """

    model_config = ConfigDict(frozen=True, extra="allow", arbitrary_types_allowed=True)

    tags: dict[str, ExtensionResolver] = Field(default_factory=dict)
    custom_compilers: dict[str, CustomCompiler] = Field(default_factory=dict)
    output_modifiers: dict[str, OutputModifier] = Field(default_factory=dict)

    @property
    def compiler_config(self) -> Mapping[str, Any]:
        """Opaque configuration forwarded to the section compilers."""
        return MappingProxyType(dict(self.model_extra or {}))


__all__ = ["PipelineOptions"]
