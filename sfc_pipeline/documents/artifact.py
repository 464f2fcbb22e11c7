"""Output artifacts: one compiled file per section kind of a document."""

import os

from pydantic import BaseModel, ConfigDict


class Artifact(BaseModel):
    """Immutable compiled output of one section kind.

    ``path`` is the full output path (input directory + input stem + resolved
    extension). ``base`` is the input document's base directory, carried over
    so sinks can lay artifacts out relative to it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    tag: str
    extension: str
    content: bytes
    base: str | None = None

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    @property
    def relative_path(self) -> str:
        """Path relative to ``base``, or the bare path when there is no base."""
        if self.base:
            return os.path.relpath(self.path, self.base)
        return self.path

    @property
    def size(self) -> int:
        return len(self.content)


def output_path(directory: str, stem: str, extension: str) -> str:
    """Join an output path as ``directory/stem.extension``."""
    return os.path.join(directory, f"{stem}.{extension}")
