"""Document model: component files in, compiled artifacts out."""

from ._hashing import compute_scope_id
from .artifact import Artifact, output_path
from .document import SourceDocument

__all__ = [
    "Artifact",
    "SourceDocument",
    "compute_scope_id",
    "output_path",
]
