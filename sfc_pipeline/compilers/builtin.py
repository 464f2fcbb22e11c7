"""Default section compilers for the built-in kinds.

These compilers do not implement any language themselves. Each one loads the
section body (inline or from ``src``), de-indents it, runs the per-language
compiler registered under ``config["compilers"][lang]`` when there is one, and
trims the result. Scoping is the only transformation they own:

- StyleCompiler rewrites the selectors of ``<style scoped>`` sections so they
  only match elements carrying the document's ``data-v-<scope id>`` attribute.
- TemplateCompiler adds that attribute to the elements of plain HTML
  templates when the document has a scoped style.
"""

import re
from typing import ClassVar

from sfc_pipeline.compilers.base import CompileRequest, SectionCompilers, load_section_content, run_sub_compiler
from sfc_pipeline.parsing import SectionNode
from sfc_pipeline.tags import BuiltinKind

SCOPE_ATTRIBUTE_PREFIX = "data-v-"

# At-rules whose blocks contain style rules that need scoping
_GROUPING_AT_RULES = frozenset({"@media", "@supports", "@document", "@layer", "@container"})

_START_TAG = re.compile(r"<([a-zA-Z][\w:.-]*)")
_UNSCOPED_ELEMENTS = frozenset({"template", "slot"})
_COMBINATORS = frozenset(" \t\n\r\f>+~")


def scope_attribute(scope_id: str) -> str:
    return f"{SCOPE_ATTRIBUTE_PREFIX}{scope_id}"


class _PassThroughCompiler:
    kind: ClassVar[BuiltinKind]

    async def compile(self, node: SectionNode, request: CompileRequest) -> str:
        content = await load_section_content(node, request)
        compiled = await run_sub_compiler(request.config, node.lang, content, request.path)
        return self.finalize(node, request, compiled.strip())

    def finalize(self, node: SectionNode, request: CompileRequest, content: str) -> str:
        return content


class TemplateCompiler(_PassThroughCompiler):
    kind = BuiltinKind.TEMPLATE

    def finalize(self, node: SectionNode, request: CompileRequest, content: str) -> str:
        if not request.has_scoped_style or node.lang not in (None, "html"):
            return content
        return add_scope_attribute(content, scope_attribute(request.scope_id))


class ScriptCompiler(_PassThroughCompiler):
    kind = BuiltinKind.SCRIPT


class StyleCompiler(_PassThroughCompiler):
    kind = BuiltinKind.STYLE

    def finalize(self, node: SectionNode, request: CompileRequest, content: str) -> str:
        if not node.scoped:
            return content
        return scope_css(content, scope_attribute(request.scope_id))


def default_section_compilers() -> SectionCompilers:
    return SectionCompilers(template=TemplateCompiler(), script=ScriptCompiler(), style=StyleCompiler())


def add_scope_attribute(html: str, attribute: str) -> str:
    """Add ``attribute`` to every element start tag except template and slot."""

    def _add(match: re.Match[str]) -> str:
        if match.group(1).lower() in _UNSCOPED_ELEMENTS:
            return match.group(0)
        return f"{match.group(0)} {attribute}"

    return _START_TAG.sub(_add, html)


def scope_css(css: str, attribute: str) -> str:
    """Append ``[attribute]`` to the last compound of every style rule selector.

    Rules nested in grouping at-rules (``@media``, ``@supports``...) are
    scoped too; ``@keyframes``, ``@font-face`` and other at-rule bodies are
    left untouched.
    """
    out: list[str] = []
    # True for blocks whose direct children are style rules
    stack: list[bool] = []
    copied = 0
    prelude_start = 0
    i = 0
    n = len(css)
    while i < n:
        if css.startswith("/*", i):
            end = css.find("*/", i + 2)
            end = n if end < 0 else end + 2
            if not css[prelude_start:i].strip():
                prelude_start = end
            i = end
            continue

        ch = css[i]
        if ch in "\"'":
            i = _skip_string(css, i)
            continue
        if ch == "{":
            prelude = css[prelude_start:i]
            keyword = prelude.strip().split(None, 1)[0].lower() if prelude.strip() else ""
            in_rule_context = not stack or stack[-1]
            if keyword.startswith("@"):
                stack.append(in_rule_context and keyword in _GROUPING_AT_RULES)
            else:
                if in_rule_context and keyword:
                    out.append(css[copied:prelude_start])
                    out.append(_scope_selector_list(prelude, attribute))
                    copied = i
                stack.append(False)
            prelude_start = i + 1
        elif ch == "}":
            if stack:
                stack.pop()
            prelude_start = i + 1
        elif ch == ";":
            prelude_start = i + 1
        i += 1

    out.append(css[copied:])
    return "".join(out)


def _skip_string(text: str, start: int) -> int:
    quote = text[start]
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return len(text)


def _split_top_level(text: str, separator: str) -> list[str]:
    """Split on ``separator`` outside brackets, parentheses and strings."""
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == separator and depth == 0:
            parts.append(text[start:i])
            start = i + 1
        i += 1
    parts.append(text[start:])
    return parts


def _scope_selector_list(prelude: str, attribute: str) -> str:
    scoped = []
    for selector in _split_top_level(prelude, ","):
        core = selector.strip()
        if not core:
            scoped.append(selector)
            continue
        lead = selector[: len(selector) - len(selector.lstrip())]
        trail = selector[len(selector.rstrip()) :]
        scoped.append(f"{lead}{_scope_selector(core, attribute)}{trail}")
    return ",".join(scoped)


def _scope_selector(selector: str, attribute: str) -> str:
    """Insert ``[attribute]`` into the last compound, before its pseudo-classes."""
    depth = 0
    compound_start = 0
    i = 0
    while i < len(selector):
        ch = selector[i]
        if ch in "\"'":
            i = _skip_string(selector, i)
            continue
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif depth == 0 and ch in _COMBINATORS:
            compound_start = i + 1
        i += 1

    insert_at = len(selector)
    depth = 0
    for j in range(compound_start, len(selector)):
        ch = selector[j]
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == ":" and depth == 0:
            insert_at = j
            break
    return f"{selector[:insert_at]}[{attribute}]{selector[insert_at:]}"
