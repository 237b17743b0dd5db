"""Property-based fuzzing tests for sanitization and parsing.

This test module uses Hypothesis to generate arbitrary text and check the
guarantees that every other part of the package relies on.

Test Coverage:
- Property: sanitize never exceeds its length cap
- Property: sanitize is idempotent
- Property: sanitized text contains no raw markup or control characters
- Property: the parser returns a document for any string input
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wpreadme import ReadmeDocument, ReadmeParser
from wpreadme.utils.sanitize import sanitize

readme_like_text = st.lists(
    st.one_of(
        st.sampled_from(
            [
                "=== Title ===",
                "== Description ==",
                "== Frequently Asked Questions ==",
                "== Changelog ==",
                "= 1.0.0 =",
                "= Question? =",
                "* change",
                "Contributors: alice, bob",
                "Stable tag: 1.2.3",
                "",
            ]
        ),
        st.text(max_size=40),
    ),
    max_size=30,
).map("\n".join)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestSanitizeProperties:
    """Property-based tests for sanitize()."""

    @given(st.text(), st.integers(min_value=0, max_value=300))
    def test_length_never_exceeds_cap(self, value, max_length):
        """Test that the result is never longer than max_length."""
        assert len(sanitize(value, max_length)) <= max_length

    @given(st.text(), st.integers(min_value=1, max_value=300))
    def test_idempotent(self, value, max_length):
        """Test that sanitizing a sanitized value returns it unchanged."""
        once = sanitize(value, max_length)
        assert sanitize(once, max_length) == once

    @given(st.text())
    def test_no_raw_markup_or_controls(self, value):
        """Test that no HTML-special or control characters survive."""
        result = sanitize(value)
        assert not any(ch in result for ch in "<>\"'")
        assert not any(ord(ch) < 0x20 or 0x7F <= ord(ch) <= 0x9F for ch in result)

    @given(st.text())
    def test_no_surrounding_whitespace(self, value):
        """Test that results are trimmed."""
        result = sanitize(value)
        assert result == result.strip()


@pytest.mark.unit
@pytest.mark.fuzzing
class TestParserProperties:
    """Property-based tests for ReadmeParser."""

    @given(readme_like_text)
    @settings(deadline=None)
    def test_parse_never_raises(self, text):
        """Test that any string within the size cap parses to a document."""
        doc = ReadmeParser().parse(text)
        assert isinstance(doc, ReadmeDocument)
        assert len(doc.tags) <= 5
        assert len(doc.contributors) <= 10
        assert all(entry.question and entry.answer for entry in doc.faqs)
        assert all(entry.version and entry.changes for entry in doc.changelog)
