"""Pipeline stages and the ComponentPipeline that chains them."""

from sfc_pipeline.pipeline.context import DocumentContext, ResolvedSection
from sfc_pipeline.pipeline.merge import MergedSection, ResultSet, merge_parts
from sfc_pipeline.pipeline.modifiers import OutputModifier, OutputModifiers
from sfc_pipeline.pipeline.options import PipelineOptions
from sfc_pipeline.pipeline.splitter import ComponentPipeline, DocumentOutcome, DocumentStatus, PipelineReport

__all__ = [
    "ComponentPipeline",
    "DocumentContext",
    "DocumentOutcome",
    "DocumentStatus",
    "MergedSection",
    "OutputModifier",
    "OutputModifiers",
    "PipelineOptions",
    "PipelineReport",
    "ResolvedSection",
    "ResultSet",
    "merge_parts",
]
