"""Configuration management for Keyla."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from keyla.utils import expand_file_path


class AppConfig(BaseModel):
    """Application configuration."""

    dictionaries_dir: str = Field("dictionaries", description="Root of <language>/<name> files")
    file_extension: str = Field(".txt", description="Extension of dictionary files")
    auto_create_directories: bool = False
    default_language: str = "english"
    word_count: int = Field(50, ge=1, description="Default number of words per test")
    seed: int | None = Field(None, description="Seed for reproducible shuffles")
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("file_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Accept extensions with or without the leading dot."""
        if not v:
            raise ValueError("file_extension cannot be empty")
        return v if v.startswith(".") else f".{v}"


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> AppConfig:
    """Load JSON config, override with CLI args, return AppConfig object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key, None)
        default_value = parser.get_default(key)
        if cli_value is not None and cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config: dict = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "dictionaries_dir": get_value("dictionaries_dir", "dictionaries"),
        "file_extension": get_value("file_extension", ".txt"),
        "auto_create_directories": json_config.get("auto_create_directories", False),
        "default_language": get_value("language", json_config.get("default_language", "english")),
        "word_count": get_value("word_count", 50),
        "seed": get_value("seed", None),
        "verbose": getattr(cli_args, "verbose", False) or json_config.get("verbose", False),
        "debug": getattr(cli_args, "debug", False) or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return AppConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
