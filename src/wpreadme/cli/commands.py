#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/cli/commands.py
"""Subcommand handlers for the wpreadme CLI.

The handlers are the file-import, preview and download collaborators around
the pure parser and generator: they read and check files, pick output
destinations and serialize parsed documents.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping

import tomli_w
import yaml

from wpreadme.cli.config import load_data_file
from wpreadme.constants import (
    ALLOWED_UPLOAD_EXTENSIONS,
    DEFAULT_OUTPUT_FILENAME,
    EXIT_SUCCESS,
    MAX_UPLOAD_SIZE_BYTES,
)
from wpreadme.document import ReadmeDocument
from wpreadme.exceptions import FileError
from wpreadme.options import ReadmeParserOptions, ReadmeRendererOptions
from wpreadme.parsers.readme import ReadmeParser
from wpreadme.renderers.readme import ReadmeRenderer

logger = logging.getLogger(__name__)


def read_readme_file(path: Path | str, max_size: int = MAX_UPLOAD_SIZE_BYTES) -> str:
    """Read a readme file after checking its extension and size.

    Parameters
    ----------
    path : Path or str
        File to read
    max_size : int, default 102400
        Maximum accepted file size in bytes

    Returns
    -------
    str
        File content decoded as UTF-8; a leading BOM is removed

    Raises
    ------
    FileError
        If the file is missing, has the wrong extension, is too large, or is
        not valid UTF-8

    """
    path = Path(path)
    if path.suffix.lower() not in ALLOWED_UPLOAD_EXTENSIONS:
        raise FileError(
            f"Unsupported file type '{path.suffix}'. Allowed: {', '.join(ALLOWED_UPLOAD_EXTENSIONS)}",
            file_path=str(path),
        )
    try:
        size = path.stat().st_size
        if size > max_size:
            raise FileError(f"File too large: {size} bytes (maximum {max_size})", file_path=str(path))
        data = path.read_bytes()
    except OSError as e:
        raise FileError(f"Cannot read file: {path}", file_path=str(path), original_error=e) from e

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileError(f"File is not valid UTF-8 text: {path}", file_path=str(path), original_error=e) from e


def serialize_document(document: ReadmeDocument, output_format: str) -> str:
    """Serialize a parsed document as JSON, YAML or TOML."""
    data = document.to_dict()
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if output_format == "toml":
        return tomli_w.dumps(data)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _emit(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8", newline="\n")
        logger.info(f"Wrote {output}")
    else:
        sys.stdout.write(text)


def _load_fields(path: str | None) -> Mapping[str, Any]:
    if not path:
        return {}
    data = load_data_file(Path(path))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(f"Field file must contain a mapping, got {type(data).__name__}")
    return data


def cmd_parse(args: argparse.Namespace, parser_options: ReadmeParserOptions) -> int:
    """Parse a readme file and print the structured document."""
    text = read_readme_file(args.input)
    document = ReadmeParser(parser_options).parse(text)
    _emit(serialize_document(document, args.format), args.output)
    return EXIT_SUCCESS


def cmd_generate(args: argparse.Namespace, renderer_options: ReadmeRendererOptions) -> int:
    """Generate a readme from a form-field record."""
    fields = _load_fields(args.fields)
    renderer = ReadmeRenderer(renderer_options)

    if args.preview:
        _emit(renderer.render_preview_html(fields) + "\n", args.output)
        return EXIT_SUCCESS

    if args.stdout:
        sys.stdout.write(renderer.render_to_string(fields))
        return EXIT_SUCCESS

    output = args.output or DEFAULT_OUTPUT_FILENAME
    renderer.render(fields, output)
    logger.info(f"Wrote {output}")
    return EXIT_SUCCESS


def cmd_normalize(
    args: argparse.Namespace, parser_options: ReadmeParserOptions, renderer_options: ReadmeRendererOptions
) -> int:
    """Parse a readme file and regenerate it in canonical form."""
    text = read_readme_file(args.input)
    document = ReadmeParser(parser_options).parse(text)
    renderer = ReadmeRenderer(renderer_options)

    if args.output:
        renderer.render(document, args.output)
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(renderer.render_to_string(document))
    return EXIT_SUCCESS
