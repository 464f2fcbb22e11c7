"""Identity hashing for component documents.

The scope id correlates scoped style output with template output, so it must
be stable for a given document: it is derived from the path when there is one
and from the content otherwise.
"""

import hashlib

SCOPE_ID_LENGTH = 8


def compute_scope_id(path: str | None, content: str) -> str:
    """Return the lowercase hex scope id of a document."""
    seed = path if path else content
    return hashlib.sha256(seed.encode("utf-8")).hexdigest()[:SCOPE_ID_LENGTH]
