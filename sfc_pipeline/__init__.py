"""SFC Pipeline - split single file components into per-section artifacts.

A component document holds a ``<template>``, a ``<script>``, any number of
``<style>`` sections and user-defined custom sections. The pipeline compiles
every section with the compiler for its kind, merges same-kind sections and
emits one artifact per kind next to the source file.

Quick Start:
    >>> from sfc_pipeline import ComponentPipeline, MemoryArtifactSink, PipelineOptions, SourceDocument
    >>>
    >>> pipeline = ComponentPipeline(
    ...     PipelineOptions(
    ...         tags={"config": lambda lang, path, node: "config.php" if lang == "php" else "ini"},
    ...         custom_compilers={"config": lambda tag, content, lang, path: "<?php\\n" + content},
    ...     )
    ... )
    >>> sink = MemoryArtifactSink()
    >>> report = await pipeline.run([await SourceDocument.from_path("src/Button.vue")], sink)

Environment Variables:
    - SFC_MAX_CONCURRENT_DOCUMENTS: documents processed at once by run()
    - SFC_PIPELINE_LOG_LEVEL: log level of the sfc_pipeline loggers
"""

from .compilers import (
    CompiledPart,
    CompileRequest,
    FileLoader,
    LocalFileLoader,
    MemoryFileLoader,
    SectionCompiler,
    SectionCompilers,
    default_section_compilers,
)
from .documents import Artifact, SourceDocument
from .exceptions import (
    CompileError,
    ConfigurationError,
    DocumentError,
    ParseError,
    SfcPipelineError,
    TooManySectionsError,
    UnsupportedInputError,
    ValidationError,
)
from .logging import LoggingConfig, get_pipeline_logger, setup_logging
from .parsing import SectionNode, parse_sections
from .pipeline import (
    ComponentPipeline,
    DocumentOutcome,
    DocumentStatus,
    PipelineOptions,
    PipelineReport,
    ResultSet,
)
from .settings import settings
from .sinks import ArtifactSink, LocalArtifactSink, MemoryArtifactSink
from .tags import BuiltinKind, CustomKind, SectionKind, TagDescriptor, TagRegistry, section_kind
from .validation import SectionStats, validate_sections

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "settings",
    "PipelineOptions",
    # Logging
    "get_pipeline_logger",
    "LoggingConfig",
    "setup_logging",
    # Documents
    "SourceDocument",
    "Artifact",
    # Parsing and validation
    "SectionNode",
    "parse_sections",
    "SectionStats",
    "validate_sections",
    # Tags
    "BuiltinKind",
    "CustomKind",
    "SectionKind",
    "TagDescriptor",
    "TagRegistry",
    "section_kind",
    # Compilers
    "CompiledPart",
    "CompileRequest",
    "SectionCompiler",
    "SectionCompilers",
    "default_section_compilers",
    "FileLoader",
    "LocalFileLoader",
    "MemoryFileLoader",
    # Pipeline
    "ComponentPipeline",
    "DocumentOutcome",
    "DocumentStatus",
    "PipelineReport",
    "ResultSet",
    # Sinks
    "ArtifactSink",
    "LocalArtifactSink",
    "MemoryArtifactSink",
    # Errors
    "SfcPipelineError",
    "DocumentError",
    "ParseError",
    "ValidationError",
    "TooManySectionsError",
    "CompileError",
    "ConfigurationError",
    "UnsupportedInputError",
]
