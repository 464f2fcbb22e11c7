"""Loading of external section sources (``<style src="./theme.css">``)."""

import asyncio
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from sfc_pipeline.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


@runtime_checkable
class FileLoader(Protocol):
    """Loads the text a section's ``src`` attribute refers to."""

    async def load(self, src: str, document_path: str | None) -> str:
        """Return the content of ``src``, resolved relative to the referencing document."""
        ...


class LocalFileLoader:
    """Reads referenced files from the local filesystem in a worker thread.

    Relative references resolve against the referencing document's directory,
    or against ``root`` (default: current directory) for path-less documents.
    """

    def __init__(self, root: Path | None = None, encoding: str = "utf-8") -> None:
        self._root = root or Path.cwd()
        self._encoding = encoding

    def resolve(self, src: str, document_path: str | None) -> Path:
        base = Path(os.path.dirname(document_path)) if document_path else self._root
        return base / src

    async def load(self, src: str, document_path: str | None) -> str:
        target = self.resolve(src, document_path)
        logger.debug(f"Loading external section source {target}")
        return await asyncio.to_thread(target.read_text, encoding=self._encoding)


class MemoryFileLoader:
    """Dict-backed loader for tests and hosts that keep sources in memory.

    Keys are ``src`` values exactly as written in the document.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files = dict(files or {})

    async def load(self, src: str, document_path: str | None) -> str:
        try:
            return self._files[src]
        except KeyError:
            raise FileNotFoundError(f"No such source: {src}") from None
