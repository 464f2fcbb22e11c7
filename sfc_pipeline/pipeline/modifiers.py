"""Per-tag post-processing of merged section content."""

from collections.abc import Callable, Mapping
from types import MappingProxyType

OutputModifier = Callable[[str, str | None], str]
"""``(content, lang) -> content``. Must be pure: no I/O, no other tags' content."""


class OutputModifiers:
    """Read-only set of output modifiers keyed by tag name."""

    def __init__(self, modifiers: Mapping[str, OutputModifier] | None = None) -> None:
        self._modifiers: Mapping[str, OutputModifier] = MappingProxyType(dict(modifiers or {}))

    def __contains__(self, tag: object) -> bool:
        return tag in self._modifiers

    def apply(self, tag: str, content: str, lang: str | None) -> str:
        """Modified content for ``tag``, or ``content`` unchanged when no modifier is registered."""
        modifier = self._modifiers.get(tag)
        if modifier is None:
            return content
        return modifier(content, lang)
