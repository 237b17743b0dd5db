#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/options/readme.py
"""Options for readme parsing and generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from wpreadme.constants import DEFAULT_MAX_INPUT_LENGTH
from wpreadme.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class ReadmeParserOptions(BaseParserOptions):
    """Configuration options for readme text to document parsing.

    Parameters
    ----------
    max_input_length : int, default = 50000
        Maximum accepted length of the trimmed input text. Longer input is
        rejected with InvalidInputError before any parsing happens.
    cap_entries : bool, default = True
        If True, keep at most ``limits.max_faqs`` FAQ entries and
        ``limits.max_changelogs`` changelog entries, in source order.
    short_description_fallback : bool, default = True
        If True and the header scan found no short description, look for
        one after the last ``License URI:``, ``Requires PHP:`` or
        ``Stable tag:`` line.

    """

    max_input_length: int = field(
        default=DEFAULT_MAX_INPUT_LENGTH,
        metadata={"help": "Maximum accepted input length in characters", "importance": "security"},
    )
    cap_entries: bool = field(
        default=True,
        metadata={"help": "Cap parsed FAQ and changelog entries at the item limits", "importance": "advanced"},
    )
    short_description_fallback: bool = field(
        default=True,
        metadata={"help": "Search for a short description after the license lines", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options.

        Raises
        ------
        ValueError
            If max_input_length is not positive.

        """
        super().__post_init__()
        if self.max_input_length <= 0:
            raise ValueError(f"max_input_length must be positive, got {self.max_input_length}")


@dataclass(frozen=True)
class ReadmeRendererOptions(BaseRendererOptions):
    """Configuration options for document to readme text generation.

    Parameters
    ----------
    trailing_newline : bool, default = True
        If True, end the generated text with a single newline.

    """

    trailing_newline: bool = field(
        default=True,
        metadata={"help": "End the generated readme with a newline", "importance": "core"},
    )
