"""Common fixtures for SFC Pipeline tests."""

import pytest

from sfc_pipeline.compilers.loader import MemoryFileLoader
from sfc_pipeline.documents import SourceDocument
from sfc_pipeline.pipeline import ComponentPipeline
from sfc_pipeline.sinks import MemoryArtifactSink
from tests.support.helpers import BUTTON_COMPONENT, make_document


@pytest.fixture
def button_document() -> SourceDocument:
    return make_document(BUTTON_COMPONENT)


@pytest.fixture
def sink() -> MemoryArtifactSink:
    return MemoryArtifactSink()


@pytest.fixture
def memory_loader() -> MemoryFileLoader:
    return MemoryFileLoader({"./theme.css": ".theme { color: blue; }\n"})


@pytest.fixture
def pipeline(memory_loader: MemoryFileLoader) -> ComponentPipeline:
    return ComponentPipeline(loader=memory_loader)
