#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Readme renderers."""

from wpreadme.renderers.base import BaseRenderer
from wpreadme.renderers.readme import ReadmeRenderer

__all__ = ["BaseRenderer", "ReadmeRenderer"]
