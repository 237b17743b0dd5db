#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/api.py
"""High-level functions for parsing and generating readme files.

These wrap :class:`~wpreadme.parsers.readme.ReadmeParser` and
:class:`~wpreadme.renderers.readme.ReadmeRenderer`. Keyword arguments are
option-field overrides applied on top of the given (or default) options.

Examples
--------
    >>> from wpreadme import generate_readme, parse_readme
    >>> text = generate_readme({"title": "Foo", "tags": ["seo", "images"]})
    >>> parse_readme(text).tags
    ('seo', 'images')

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

from wpreadme.document import ReadmeDocument
from wpreadme.options.base import CloneFrozenMixin
from wpreadme.options.readme import ReadmeParserOptions, ReadmeRendererOptions
from wpreadme.parsers.readme import ReadmeParser
from wpreadme.renderers.readme import ReadmeRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _apply_overrides(options: OptionsT, overrides: dict[str, Any]) -> OptionsT:
    if not overrides:
        return options
    logger.debug(f"Applying option overrides: {sorted(overrides)}")
    return options.create_updated(**overrides)


def parse_readme(text: str, options: ReadmeParserOptions | None = None, **kwargs: Any) -> ReadmeDocument:
    """Parse readme text into a :class:`ReadmeDocument`.

    Parameters
    ----------
    text : str
        Raw readme text
    options : ReadmeParserOptions or None, default = None
        Parser options
    **kwargs
        Overrides for individual ReadmeParserOptions fields

    Returns
    -------
    ReadmeDocument
        Parsed document

    Raises
    ------
    InvalidInputError
        If text is not a string or is too long

    """
    parser_options = _apply_overrides(options or ReadmeParserOptions(), kwargs)
    return ReadmeParser(parser_options).parse(text)


def generate_readme(
    fields: ReadmeDocument | Mapping[str, Any] | None = None,
    options: ReadmeRendererOptions | None = None,
    **kwargs: Any,
) -> str:
    """Generate canonical readme text from a document or form-field record.

    Parameters
    ----------
    fields : ReadmeDocument, Mapping or None, default = None
        Field values; None means every field takes its default
    options : ReadmeRendererOptions or None, default = None
        Renderer options
    **kwargs
        Overrides for individual ReadmeRendererOptions fields

    Returns
    -------
    str
        Complete readme text

    """
    renderer_options = _apply_overrides(options or ReadmeRendererOptions(), kwargs)
    return ReadmeRenderer(renderer_options).render_to_string(fields if fields is not None else {})


def normalize_readme(
    text: str,
    parser_options: ReadmeParserOptions | None = None,
    renderer_options: ReadmeRendererOptions | None = None,
) -> str:
    """Parse readme text and regenerate it in canonical form.

    Parameters
    ----------
    text : str
        Raw readme text
    parser_options : ReadmeParserOptions or None, default = None
        Parser options
    renderer_options : ReadmeRendererOptions or None, default = None
        Renderer options

    Returns
    -------
    str
        Canonical readme text

    """
    document = ReadmeParser(parser_options).parse(text)
    return ReadmeRenderer(renderer_options).render_to_string(document)
