#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Readme parsers."""

from wpreadme.parsers.base import BaseParser
from wpreadme.parsers.readme import ReadmeParser

__all__ = ["BaseParser", "ReadmeParser"]
