#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Immutable configuration values for the readme parser and generator."""

from wpreadme.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin, ReadmeLimits
from wpreadme.options.readme import ReadmeParserOptions, ReadmeRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ReadmeLimits",
    "ReadmeParserOptions",
    "ReadmeRendererOptions",
]
