"""Pytest configuration and shared fixtures for the wpreadme test suite."""

import os
from pathlib import Path

import pytest

try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed; property tests will fail to import on their own
    pass

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "readmes"

MINIMAL_README = (
    "=== Foo ===\n\nContributors: alice, bob\nTags: x, y\nStable tag: 2.0.0\n\n"
    "Short desc here.\n\n== Description ==\n\nBody text.\n\n== Installation ==\n\nStep 1.\n"
)

FAQ_BLOCK = (
    "== Frequently Asked Questions ==\n\n= How? =\n\nLike this.\n\n= Why? =\n\nBecause.\n\n== Changelog =="
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample readme files."""
    return FIXTURES_DIR


@pytest.fixture
def full_readme_text() -> str:
    """A complete, realistic readme.txt."""
    return (FIXTURES_DIR / "full_readme.txt").read_text(encoding="utf-8")


@pytest.fixture
def minimal_readme() -> str:
    """Minimal readme with header, short description and two sections."""
    return MINIMAL_README


@pytest.fixture
def faq_block() -> str:
    """FAQ block followed by an empty changelog marker."""
    return FAQ_BLOCK
