"""Unit tests for wpreadme CLI configuration handling.

This module tests configuration file discovery, loading from each supported
format, and conversion to parser and renderer options.
"""

import argparse
import json
from unittest.mock import patch

import pytest
import tomli_w
import yaml

from wpreadme.cli.config import (
    find_config_in_parents,
    load_config_file,
    load_data_file,
    options_from_config,
)
from wpreadme.options import ReadmeParserOptions, ReadmeRendererOptions


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery."""

    def test_discover_in_cwd(self, tmp_path):
        """Test finding a dotfile in the current directory."""
        config_file = tmp_path / ".wpreadme.toml"
        config_file.write_text("[limits]\nmax_tags = 3\n")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = find_config_in_parents()

        assert discovered == config_file.resolve()

    def test_discover_in_parent(self, tmp_path):
        """Test finding a config file in a parent directory."""
        config_file = tmp_path / ".wpreadme.yaml"
        config_file.write_text("limits:\n  max_tags: 3\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config_file.resolve()

    def test_toml_preferred_over_json(self, tmp_path):
        """Test the discovery order within one directory."""
        (tmp_path / ".wpreadme.json").write_text("{}")
        (tmp_path / ".wpreadme.toml").write_text("")

        assert find_config_in_parents(tmp_path).name == ".wpreadme.toml"

    def test_pyproject_with_section(self, tmp_path):
        """Test that pyproject.toml counts only with a [tool.wpreadme] table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.wpreadme.parser]\ncap_entries = false\n')

        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_pyproject_without_section_skipped(self, tmp_path):
        """Test that a pyproject.toml without the section is not a config."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        nested = tmp_path / "pkg"
        nested.mkdir()

        result = find_config_in_parents(nested)
        assert result is None or tmp_path.resolve() not in result.parents

    def test_invalid_pyproject_skipped(self, tmp_path):
        """Test that an unparseable pyproject.toml does not stop discovery."""
        config_file = tmp_path / ".wpreadme.json"
        config_file.write_text("{}")
        nested = tmp_path / "pkg"
        nested.mkdir()
        (nested / "pyproject.toml").write_text("not [valid toml")

        assert find_config_in_parents(nested) == config_file.resolve()


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading configuration files."""

    def test_load_toml(self, tmp_path):
        """Test loading a TOML file."""
        path = tmp_path / "config.toml"
        path.write_text(tomli_w.dumps({"limits": {"title": 80}}))
        assert load_config_file(path) == {"limits": {"title": 80}}

    def test_load_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "config.yml"
        path.write_text(yaml.safe_dump({"renderer": {"trailing_newline": False}}))
        assert load_config_file(path) == {"renderer": {"trailing_newline": False}}

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"parser": {"max_input_length": 1000}}))
        assert load_config_file(path) == {"parser": {"max_input_length": 1000}}

    def test_load_pyproject_section(self, tmp_path):
        """Test loading the [tool.wpreadme] section."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.wpreadme.limits]\nmax_faqs = 5\n")
        assert load_config_file(path) == {"limits": {"max_faqs": 5}}

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_directory_rejected(self, tmp_path):
        """Test that a directory is not accepted as a config file."""
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)

    @pytest.mark.parametrize(
        "name,content",
        [("bad.toml", "limits = [unclosed"), ("bad.json", "{not json"), ("bad.yaml", "a: [b")],
    )
    def test_invalid_content(self, tmp_path, name, content):
        """Test that parse errors become configuration errors."""
        path = tmp_path / name
        path.write_text(content)
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid"):
            load_config_file(path)

    def test_non_mapping_rejected(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(argparse.ArgumentTypeError, match="mapping"):
            load_config_file(path)

    def test_unsupported_extension(self, tmp_path):
        """Test that unknown extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[limits]")
        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported"):
            load_data_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestOptionsFromConfig:
    """Test turning configuration dictionaries into options."""

    def test_empty_config(self):
        """Test that an empty config gives default options."""
        parser_options, renderer_options = options_from_config({})
        assert parser_options == ReadmeParserOptions()
        assert renderer_options == ReadmeRendererOptions()

    def test_limits_shared(self):
        """Test that limits apply to both parser and renderer."""
        parser_options, renderer_options = options_from_config(
            {"limits": {"max_tags": 2}, "parser": {"cap_entries": False}, "renderer": {"trailing_newline": False}}
        )
        assert parser_options.limits.max_tags == 2
        assert renderer_options.limits.max_tags == 2
        assert parser_options.cap_entries is False
        assert renderer_options.trailing_newline is False

    def test_unknown_section(self):
        """Test that unknown sections are rejected."""
        with pytest.raises(argparse.ArgumentTypeError, match="section"):
            options_from_config({"pdf": {}})

    def test_unknown_option(self):
        """Test that unknown options are rejected with their names."""
        with pytest.raises(argparse.ArgumentTypeError, match="bogus"):
            options_from_config({"limits": {"bogus": 1}})

    def test_limits_cannot_be_nested_in_parser(self):
        """Test that limits are configured only in their own table."""
        with pytest.raises(argparse.ArgumentTypeError):
            options_from_config({"parser": {"limits": {"title": 5}}})

    def test_invalid_value(self):
        """Test that invalid values become configuration errors."""
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid configuration"):
            options_from_config({"limits": {"title": -1}})

    def test_table_must_be_mapping(self):
        """Test that a section must be a table."""
        with pytest.raises(argparse.ArgumentTypeError, match="table"):
            options_from_config({"limits": [1, 2]})

