"""Integration tests for parse and generate working together.

Generated text must parse back to the fields it was generated from, and a
parse/generate cycle must reach a fixed point after one iteration.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wpreadme import ChangelogEntry, FAQEntry, ReadmeDocument, generate_readme, normalize_readme, parse_readme

username = st.from_regex(r"[a-zA-Z0-9_-]{1,20}", fullmatch=True)
version = st.from_regex(r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}", fullmatch=True)
plain_text = st.from_regex(r"[A-Za-z][A-Za-z0-9 ,.!?]{0,60}[A-Za-z0-9.!?]", fullmatch=True)


@pytest.mark.integration
class TestRoundTrip:
    """Round trips between documents and readme text."""

    def test_generated_text_parses_back(self):
        """Test that a complete record survives generate then parse."""
        fields = {
            "title": "Foo Bar",
            "short_description": "Makes foo better.",
            "contributors": ["alice", "bob"],
            "tags": ["seo", "images"],
            "version": "1.4.2",
            "requires_at_least": "6.0",
            "tested_up_to": "6.5",
            "requires_php": "8.0",
            "description": "A long description.",
            "installation": "Unzip and activate.",
            "faqs": [{"question": "Is it free?", "answer": "Yes."}],
            "changelog": [{"version": "1.4.2", "changes": ["Fixed a bug", "Added a feature"]}],
        }
        doc = parse_readme(generate_readme(fields))

        assert doc.title == "Foo Bar"
        assert doc.short_description == "Makes foo better."
        assert doc.contributors == ("alice", "bob")
        assert doc.tags == ("seo", "images")
        assert doc.version == "1.4.2"
        assert doc.requires_php == "8.0"
        assert doc.description == "A long description."
        assert doc.installation == "Unzip and activate."
        assert doc.faqs == (FAQEntry("Is it free?", "Yes."),)
        assert doc.changelog == (ChangelogEntry("1.4.2", ("Fixed a bug", "Added a feature")),)

    def test_defaults_parse_back(self):
        """Test that the default readme parses to the default values."""
        doc = parse_readme(generate_readme())
        assert doc.title == "Plugin Name"
        assert doc.contributors == ("username",)
        assert doc.version == "1.0.0"
        assert doc.faqs[0].question == "How do I use this plugin?"
        assert doc.changelog == (ChangelogEntry("1.0.0", ("Initial release",)),)

    def test_escaped_text_is_stable(self):
        """Test that escaped characters do not get escaped again on each cycle."""
        first = normalize_readme(generate_readme({"title": "Tom & Jerry's <Plugin>"}))
        assert normalize_readme(first) == first
        assert "=== Tom &amp; Jerry&#x27;s &lt;Plugin&gt; ===" in first

    def test_normalize_fixed_point(self, full_readme_text):
        """Test that normalizing twice equals normalizing once."""
        once = normalize_readme(full_readme_text)
        assert normalize_readme(once) == once

    def test_fixture_files_reach_fixed_point(self, fixtures_dir):
        """Test the fixed point for every sample readme."""
        for path in sorted(fixtures_dir.glob("*.txt")):
            once = normalize_readme(path.read_text(encoding="utf-8"))
            assert normalize_readme(once) == once, path.name


@pytest.mark.integration
@pytest.mark.fuzzing
class TestRoundTripProperties:
    """Property-based round trips."""

    @given(
        title=plain_text,
        short=plain_text,
        contributors=st.lists(username, min_size=1, max_size=10),
        stable=version,
        faqs=st.lists(st.tuples(plain_text, plain_text), max_size=5),
    )
    @settings(deadline=None)
    def test_fields_survive(self, title, short, contributors, stable, faqs):
        """Test that generated fields parse back unchanged."""
        fields = {
            "title": title,
            "short_description": short,
            "contributors": contributors,
            "version": stable,
            "faqs": [{"question": q, "answer": a} for q, a in faqs],
        }
        doc = parse_readme(generate_readme(fields))

        assert doc.title == " ".join(title.split())
        assert doc.short_description == " ".join(short.split())
        assert doc.contributors == tuple(contributors)
        assert doc.version == stable
        if faqs:
            assert [entry.question for entry in doc.faqs] == [" ".join(q.split()) for q, _ in faqs]

    @given(
        st.builds(
            ReadmeDocument,
            title=plain_text,
            version=version,
            tags=st.lists(st.from_regex(r"[a-z]{1,10}", fullmatch=True), max_size=5),
        )
    )
    @settings(deadline=None)
    def test_document_regenerates_identically(self, doc):
        """Test that generate(parse(generate(doc))) == generate(doc)."""
        text = generate_readme(doc)
        assert generate_readme(parse_readme(text)) == text
