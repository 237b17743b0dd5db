#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/parsers/base.py
"""Base class for readme parsers.

Parsers are pure transformations from text to a
:class:`~wpreadme.document.ReadmeDocument`; they never touch the file system.
Loading text from files is the job of the command-line front end.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from wpreadme.document import ReadmeDocument
from wpreadme.exceptions import InvalidInputError, InvalidOptionsError
from wpreadme.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for readme parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser configuration. If None, default options will be used.

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _check_text_input(text: Any, max_length: int) -> str:
        """Enforce the global parser preconditions.

        Parameters
        ----------
        text : Any
            Candidate readme text
        max_length : int
            Maximum allowed length after trimming

        Returns
        -------
        str
            The input text, unchanged

        Raises
        ------
        InvalidInputError
            If text is not a string or is longer than max_length once trimmed

        """
        if not isinstance(text, str):
            raise InvalidInputError(f"Invalid readme content: expected str, got {type(text).__name__}")
        trimmed_length = len(text.strip())
        if trimmed_length > max_length:
            raise InvalidInputError(
                f"Readme content too large: {trimmed_length} characters (maximum {max_length})",
                input_length=trimmed_length,
            )
        return text

    @abstractmethod
    def parse(self, text: str) -> ReadmeDocument:
        """Parse readme text into a document.

        Parameters
        ----------
        text : str
            Raw readme text

        Returns
        -------
        ReadmeDocument
            Parsed document; sections missing from the input keep their defaults

        Raises
        ------
        InvalidInputError
            If the input fails the global preconditions

        """
        raise NotImplementedError
