"""Exception hierarchy for SFC Pipeline.

All exceptions inherit from SfcPipelineError. Errors tied to a single input
document derive from DocumentError and carry the document path so a failure
can always be traced back to the offending file.
"""


class SfcPipelineError(Exception):
    """Base exception for all SFC Pipeline errors."""


class ConfigurationError(SfcPipelineError):
    """Raised when a registered tag cannot produce a usable configuration value.

    Handled leniently by the tag registry, which falls back to a default
    extension instead of failing the document.
    """


class DocumentError(SfcPipelineError):
    """Base exception for errors scoped to a single input document."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ParseError(DocumentError):
    """Raised when a document is not well-formed at the top level."""

    def __init__(self, message: str, path: str | None = None, line: int | None = None, column: int | None = None):
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"{message}{location}", path)
        self.line = line
        self.column = column


class ValidationError(DocumentError):
    """Raised when a document violates a structural invariant."""


class TooManySectionsError(ValidationError):
    """Raised when a single-occurrence section kind appears more than once."""

    def __init__(self, kind: str, count: int, path: str | None = None):
        super().__init__(f"Only one <{kind}> section is allowed per component file, found {count}.", path)
        self.kind = kind
        self.count = count


class CompileError(DocumentError):
    """Raised when any section compiler of a document rejects."""


class UnsupportedInputError(DocumentError):
    """Raised when a document cannot be represented as in-memory text."""
