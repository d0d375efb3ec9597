"""Unit tests for configuration loading."""

import json

import pytest

from keyla.cli.parser import create_parser
from keyla.core.config import AppConfig, load_config


def _load(argv: list[str], json_path=None) -> AppConfig:
    parser = create_parser()
    args = parser.parse_args(argv)
    return load_config(str(json_path) if json_path else None, args, parser)


def _write_json(tmp_path, data: dict):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestAppConfig:
    """Test AppConfig validation."""

    def test_extension_gets_leading_dot(self) -> None:
        """When the extension has no dot, one is added."""
        assert AppConfig(file_extension="dic").file_extension == ".dic"

    def test_rejects_empty_extension(self) -> None:
        """When the extension is empty, validation fails."""
        with pytest.raises(ValueError):
            AppConfig(file_extension="")

    def test_rejects_zero_word_count(self) -> None:
        """When word count is zero, validation fails."""
        with pytest.raises(ValueError):
            AppConfig(word_count=0)


class TestLoadConfig:
    """Test load_config precedence and errors."""

    def test_defaults_without_json_or_flags(self) -> None:
        """When nothing is given, the defaults are used."""
        assert _load([]) == AppConfig()

    def test_json_values_are_used(self, tmp_path) -> None:
        """When JSON sets a value and the CLI does not, the JSON value wins."""
        path = _write_json(tmp_path, {"word_count": 25})
        assert _load([], path).word_count == 25

    def test_cli_overrides_json(self, tmp_path) -> None:
        """When both set a value, the CLI value wins."""
        path = _write_json(tmp_path, {"word_count": 25})
        assert _load(["--word-count", "10"], path).word_count == 10

    def test_language_flag_sets_default_language(self) -> None:
        """When --language is given, it becomes the default language."""
        assert _load(["--language", "italian"]).default_language == "italian"

    def test_json_default_language(self, tmp_path) -> None:
        """When JSON sets default_language, it is used."""
        path = _write_json(tmp_path, {"default_language": "italian"})
        assert _load([], path).default_language == "italian"

    def test_verbose_from_json(self, tmp_path) -> None:
        """When JSON enables verbose, the flag is not needed."""
        path = _write_json(tmp_path, {"verbose": True})
        assert _load([], path).verbose

    def test_auto_create_from_json(self, tmp_path) -> None:
        """When JSON enables directory creation, it is kept."""
        path = _write_json(tmp_path, {"auto_create_directories": True})
        assert _load([], path).auto_create_directories

    def test_missing_file_raises(self, tmp_path) -> None:
        """When the config file does not exist, FileNotFoundError is raised."""
        with pytest.raises(FileNotFoundError):
            _load([], tmp_path / "missing.json")

    def test_invalid_json_raises_value_error(self, tmp_path) -> None:
        """When the config file is not valid JSON, ValueError is raised."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            _load([], path)

    def test_invalid_value_raises_value_error(self, tmp_path) -> None:
        """When a value fails validation, ValueError is raised."""
        path = _write_json(tmp_path, {"word_count": -3})
        with pytest.raises(ValueError, match="Invalid configuration"):
            _load([], path)
