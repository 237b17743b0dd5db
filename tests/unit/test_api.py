#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the high-level API functions."""

import pytest

import wpreadme
from wpreadme import (
    InvalidInputError,
    ReadmeDocument,
    ReadmeParserOptions,
    ReadmeRendererOptions,
    WpReadmeError,
    generate_readme,
    normalize_readme,
    parse_readme,
)


@pytest.mark.unit
class TestParseReadme:
    """Tests for parse_readme()."""

    def test_returns_document(self, minimal_readme):
        """Test parsing with default options."""
        doc = parse_readme(minimal_readme)
        assert isinstance(doc, ReadmeDocument)
        assert doc.title == "Foo"

    def test_keyword_overrides(self, fixtures_dir):
        """Test that keyword arguments override option fields."""
        text = (fixtures_dir / "untitled.txt").read_text(encoding="utf-8")
        assert parse_readme(text).short_description
        assert parse_readme(text, short_description_fallback=False).short_description == ""

    def test_overrides_apply_on_top_of_options(self):
        """Test that overrides are applied to the given options object."""
        options = ReadmeParserOptions(max_input_length=100)
        with pytest.raises(InvalidInputError):
            parse_readme("=== Foo ===", options, max_input_length=5)

    def test_unknown_override(self):
        """Test that unknown option names raise TypeError."""
        with pytest.raises(TypeError):
            parse_readme("", no_such_option=True)

    def test_errors_share_base_class(self):
        """Test that input errors are catchable as WpReadmeError."""
        with pytest.raises(WpReadmeError):
            parse_readme(None)  # type: ignore[arg-type]


@pytest.mark.unit
class TestGenerateReadme:
    """Tests for generate_readme()."""

    def test_no_fields(self):
        """Test that no arguments renders the default readme."""
        assert generate_readme() == generate_readme({})
        assert generate_readme().startswith("=== Plugin Name ===\n")

    def test_keyword_overrides(self):
        """Test renderer option overrides."""
        assert not generate_readme({}, trailing_newline=False).endswith("\n")

    def test_options_object(self):
        """Test passing a renderer options object."""
        options = ReadmeRendererOptions(trailing_newline=False)
        assert generate_readme({"title": "Foo"}, options) == generate_readme({"title": "Foo"}).rstrip("\n")

    def test_document_input(self, minimal_readme):
        """Test rendering a parsed document."""
        text = generate_readme(parse_readme(minimal_readme))
        assert "Contributors: alice, bob\n" in text
        assert "Stable tag: 2.0.0\n" in text


@pytest.mark.unit
class TestNormalizeReadme:
    """Tests for normalize_readme()."""

    def test_equivalent_to_parse_then_generate(self, full_readme_text):
        """Test that normalize is parse followed by generate."""
        assert normalize_readme(full_readme_text) == generate_readme(parse_readme(full_readme_text))

    def test_with_options(self, minimal_readme):
        """Test passing both option objects."""
        text = normalize_readme(
            minimal_readme,
            ReadmeParserOptions(),
            ReadmeRendererOptions(trailing_newline=False),
        )
        assert text.endswith("* Initial release")


@pytest.mark.unit
def test_public_exports():
    """Test that the documented names are importable from the package."""
    for name in wpreadme.__all__:
        assert hasattr(wpreadme, name)
    assert wpreadme.__version__
