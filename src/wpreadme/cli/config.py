#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the wpreadme CLI.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML, and turning them into parser and renderer
options. A configuration has up to three tables::

    [limits]
    title = 80
    max_tags = 3

    [parser]
    cap_entries = false

    [renderer]
    trailing_newline = true

"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from wpreadme.options import ReadmeLimits, ReadmeParserOptions, ReadmeRendererOptions

CONFIG_FILENAMES = [".wpreadme.toml", ".wpreadme.yaml", ".wpreadme.yml", ".wpreadme.json"]
CONFIG_SECTIONS = ("limits", "parser", "renderer")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.wpreadme] section from a pyproject.toml file.

    Returns
    -------
    dict
        Configuration dictionary, or empty dict if the section is absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("wpreadme", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.wpreadme] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from start_dir to the filesystem root, checking each directory
    for ``.wpreadme.toml``, ``.wpreadme.yaml``, ``.wpreadme.yml``,
    ``.wpreadme.json`` and finally a ``pyproject.toml`` with a
    ``[tool.wpreadme]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Invalid pyproject.toml, keep searching
                pass

        if current.parent == current:
            return None
        current = current.parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    data = load_data_file(config_path)
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(f"Config file must contain a mapping, got {type(data).__name__}")
    return data


def load_data_file(path: Path) -> Any:
    """Load a JSON, TOML or YAML file based on its extension.

    Used for configuration files and for form-field records.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read or parsed, or the extension is unsupported

    """
    ext = path.suffix.lower()
    try:
        if ext == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        if ext in (".yaml", ".yml"):
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        if ext == ".json":
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading {path}: {e}") from e

    raise argparse.ArgumentTypeError(f"Unsupported file format: {ext}. Use .json, .toml, or .yaml")


def _checked_table(config: Dict[str, Any], name: str, allowed: set[str]) -> Dict[str, Any]:
    table = config.get(name) or {}
    if not isinstance(table, dict):
        raise argparse.ArgumentTypeError(f"[{name}] must be a table, got {type(table).__name__}")
    unknown = sorted(set(table) - allowed)
    if unknown:
        raise argparse.ArgumentTypeError(f"Unknown [{name}] option(s): {', '.join(unknown)}")
    return table


def options_from_config(config: Dict[str, Any]) -> tuple[ReadmeParserOptions, ReadmeRendererOptions]:
    """Build parser and renderer options from a configuration dictionary.

    Parameters
    ----------
    config : dict
        Configuration with optional ``limits``, ``parser`` and ``renderer`` tables

    Returns
    -------
    tuple of (ReadmeParserOptions, ReadmeRendererOptions)
        Options sharing the same limits

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration has unknown sections or options, or invalid values

    """
    unknown_sections = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise argparse.ArgumentTypeError(f"Unknown configuration section(s): {', '.join(unknown_sections)}")

    limit_names = {f.name for f in fields(ReadmeLimits)}
    parser_names = {f.name for f in fields(ReadmeParserOptions)} - {"limits"}
    renderer_names = {f.name for f in fields(ReadmeRendererOptions)} - {"limits"}

    try:
        limits = ReadmeLimits(**_checked_table(config, "limits", limit_names))
        parser_options = ReadmeParserOptions(limits=limits, **_checked_table(config, "parser", parser_names))
        renderer_options = ReadmeRendererOptions(limits=limits, **_checked_table(config, "renderer", renderer_names))
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e

    return parser_options, renderer_options
