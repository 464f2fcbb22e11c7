"""Tests for external section source loaders."""

from pathlib import Path

import pytest

from sfc_pipeline.compilers.loader import FileLoader, LocalFileLoader, MemoryFileLoader


class TestLocalFileLoader:
    @pytest.mark.asyncio
    async def test_relative_to_document(self, tmp_path: Path):
        (tmp_path / "components").mkdir()
        (tmp_path / "components" / "theme.css").write_text(".a { b: c; }")
        loader = LocalFileLoader()

        content = await loader.load("./theme.css", str(tmp_path / "components" / "A.vue"))

        assert content == ".a { b: c; }"

    @pytest.mark.asyncio
    async def test_root_used_without_document_path(self, tmp_path: Path):
        (tmp_path / "shared.js").write_text("export {}")
        loader = LocalFileLoader(root=tmp_path)
        assert await loader.load("shared.js", None) == "export {}"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            await LocalFileLoader(root=tmp_path).load("nope.css", None)

    def test_resolve(self, tmp_path: Path):
        loader = LocalFileLoader(root=tmp_path)
        assert loader.resolve("a.css", "src/B.vue") == Path("src") / "a.css"
        assert loader.resolve("a.css", None) == tmp_path / "a.css"

    def test_satisfies_protocol(self):
        assert isinstance(LocalFileLoader(), FileLoader)


class TestMemoryFileLoader:
    @pytest.mark.asyncio
    async def test_load_by_src(self, memory_loader: MemoryFileLoader):
        assert await memory_loader.load("./theme.css", "any/path.vue") == ".theme { color: blue; }\n"

    @pytest.mark.asyncio
    async def test_unknown_src(self):
        with pytest.raises(FileNotFoundError, match="No such source: x.css"):
            await MemoryFileLoader().load("x.css", None)

    def test_satisfies_protocol(self):
        assert isinstance(MemoryFileLoader(), FileLoader)
