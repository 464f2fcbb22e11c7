"""Tests for the exception hierarchy."""

from sfc_pipeline.exceptions import (
    CompileError,
    ConfigurationError,
    DocumentError,
    ParseError,
    SfcPipelineError,
    TooManySectionsError,
    UnsupportedInputError,
    ValidationError,
)


class TestHierarchy:
    def test_document_errors_share_base(self):
        for error_type in (ParseError, ValidationError, TooManySectionsError, CompileError, UnsupportedInputError):
            assert issubclass(error_type, DocumentError)
            assert issubclass(error_type, SfcPipelineError)

    def test_configuration_error_is_not_document_error(self):
        assert issubclass(ConfigurationError, SfcPipelineError)
        assert not issubclass(ConfigurationError, DocumentError)


class TestDocumentErrors:
    def test_path_is_kept(self):
        error = CompileError("boom", "src/A.vue")
        assert error.path == "src/A.vue"
        assert str(error) == "boom"

    def test_parse_error_location(self):
        error = ParseError("Unclosed <style> section", "A.vue", line=3, column=2)
        assert error.line == 3
        assert error.column == 2
        assert str(error) == "Unclosed <style> section (line 3, column 2)"

    def test_parse_error_without_location(self):
        assert str(ParseError("bad")) == "bad"

    def test_too_many_sections_names_kind_and_count(self):
        error = TooManySectionsError("template", 2, "A.vue")
        assert error.kind == "template"
        assert error.count == 2
        assert "<template>" in str(error)
        assert "2" in str(error)
        assert isinstance(error, ValidationError)
