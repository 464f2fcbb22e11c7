"""Input documents for the splitting pipeline.

A SourceDocument is what the host build tool hands to the pipeline: the raw
content of one component file plus the path used for artifact naming and
identity hashing.
"""

import asyncio
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from sfc_pipeline.exceptions import UnsupportedInputError

from ._hashing import compute_scope_id


class SourceDocument(BaseModel):
    """Immutable component file handed to the pipeline.

    ``content`` is normalized to bytes on construction. ``None`` marks a null
    document (an entry with no contents, such as a directory) and an object
    with a ``read`` method marks a stream, which the pipeline cannot split.

    Example:
        >>> doc = SourceDocument(path="src/Button.vue", content="<template>...</template>")
        >>> doc.stem
        'Button'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    path: str | None = None
    base: str | None = None
    content: Any = None

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> Any:
        """Encode text to UTF-8; keep bytes, None and readable streams as they are."""
        if v is None or isinstance(v, bytes):
            return v
        if isinstance(v, str):
            return v.encode("utf-8")
        if isinstance(v, (bytearray, memoryview)):
            return bytes(v)
        if callable(getattr(v, "read", None)):
            return v
        raise ValueError(f"Invalid content type: {type(v)}")

    @classmethod
    async def from_path(cls, path: str | Path, base: str | Path | None = None) -> "SourceDocument":
        """Read a component file from local disk."""
        file_path = Path(path)
        content = await asyncio.to_thread(file_path.read_bytes)
        return cls(path=str(file_path), base=str(base) if base is not None else None, content=content)

    @property
    def is_null(self) -> bool:
        return self.content is None

    @property
    def is_stream(self) -> bool:
        return self.content is not None and not isinstance(self.content, bytes)

    @property
    def text(self) -> str:
        """Content decoded as UTF-8.

        Raises:
            UnsupportedInputError: For null documents, streams, and content
                that is not valid UTF-8.
        """
        if self.is_null:
            raise UnsupportedInputError("Document has no contents", self.path)
        if self.is_stream:
            raise UnsupportedInputError("Streams are not supported", self.path)
        try:
            return self.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnsupportedInputError(f"Document is not valid UTF-8 text: {e}", self.path) from e

    @property
    def directory(self) -> str:
        """Directory part of the path; empty for path-less documents."""
        return os.path.dirname(self.path) if self.path else ""

    @property
    def stem(self) -> str:
        """File name without its extension; ``component`` for path-less documents."""
        if not self.path:
            return "component"
        name = os.path.basename(self.path)
        return os.path.splitext(name)[0]

    @property
    def display_path(self) -> str:
        """Path relative to the working directory, for error messages."""
        if not self.path:
            return "<memory>"
        try:
            return os.path.relpath(self.path)
        except ValueError:
            return self.path

    def scope_id(self, text: str | None = None) -> str:
        """Identity hash used to scope styles to this document."""
        return compute_scope_id(self.path, text if text is not None else self.text)
