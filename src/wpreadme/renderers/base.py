#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/renderers/base.py
"""Base class for readme renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from wpreadme.exceptions import InvalidOptionsError, RenderingError
from wpreadme.options.base import BaseRendererOptions
from wpreadme.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for readme renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer configuration. If None, default options will be used.

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def render_to_string(self, fields: Any) -> str:
        """Render field values to text.

        Parameters
        ----------
        fields : Any
            Document or form-field record to render

        Returns
        -------
        str
            Rendered text

        """
        raise NotImplementedError

    def render(self, fields: Any, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render field values and write the text to ``output``.

        Parameters
        ----------
        fields : Any
            Document or form-field record to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        text = self.render_to_string(fields)
        try:
            self.write_text_output(text, output)
        except OSError as e:
            raise RenderingError(f"Failed to write readme: {e}", rendering_stage="output", original_error=e) from e

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream as UTF-8 without BOM."""
        write_content(text, output)
