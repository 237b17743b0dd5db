#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/utils/io_utils.py
"""I/O utilities for handling output destinations.

Generated readme text is always written as UTF-8 without a byte order mark.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written as UTF-8; binary streams receive
        UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    TypeError
        If content is not a string or output is not a supported destination

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("=== Foo ===", buffer)
        >>> buffer.getvalue()
        b'=== Foo ==='

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content)}")

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8", newline="\n")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    # Detect if binary or text mode
    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    elif hasattr(output, "mode"):
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode
    else:
        is_binary_mode = False

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)
