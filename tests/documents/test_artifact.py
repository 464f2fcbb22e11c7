"""Tests for Artifact and output path construction."""

import os

import pytest
from pydantic import ValidationError

from sfc_pipeline.documents import Artifact, output_path


class TestOutputPath:
    def test_joins_directory_stem_extension(self):
        assert output_path("src/components", "Button", "css") == os.path.join("src/components", "Button.css")

    def test_multi_part_extension(self):
        assert output_path("app", "Settings", "config.php") == os.path.join("app", "Settings.config.php")

    def test_empty_directory(self):
        assert output_path("", "Button", "js") == "Button.js"


class TestArtifact:
    def test_helpers(self):
        artifact = Artifact(path="/proj/src/Button.css", base="/proj", tag="style", extension="css", content=b".a{}")
        assert artifact.name == "Button.css"
        assert artifact.text == ".a{}"
        assert artifact.size == 4
        assert artifact.relative_path == os.path.join("src", "Button.css")

    def test_relative_path_without_base(self):
        artifact = Artifact(path="src/Button.js", tag="script", extension="js", content=b"")
        assert artifact.relative_path == "src/Button.js"

    def test_frozen(self):
        artifact = Artifact(path="a.js", tag="script", extension="js", content=b"")
        with pytest.raises(ValidationError):
            artifact.path = "b.js"  # type: ignore[misc]
