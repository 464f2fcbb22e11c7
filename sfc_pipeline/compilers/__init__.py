"""Section compiler capabilities and the default pass-through compilers."""

from .base import CompiledPart, CompileRequest, SectionCompiler, SectionCompilers, deindent
from .builtin import ScriptCompiler, StyleCompiler, TemplateCompiler, default_section_compilers, scope_css
from .loader import FileLoader, LocalFileLoader, MemoryFileLoader

__all__ = [
    "CompileRequest",
    "CompiledPart",
    "FileLoader",
    "LocalFileLoader",
    "MemoryFileLoader",
    "ScriptCompiler",
    "SectionCompiler",
    "SectionCompilers",
    "StyleCompiler",
    "TemplateCompiler",
    "deindent",
    "default_section_compilers",
    "scope_css",
]
