"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from designcode.core.config.models import EngineConfig

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("engine.json")
        'json'
        >>> detect_format("engine.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> Any:
    """Load and return raw configuration data.

    Supports both JSON and YAML formats, detected from the file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Parsed document (usually a dict; empty YAML files yield ``{}``)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                # safe_load returns None for empty files
                return content if content is not None else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_engine_config(path: str | Path | None = None) -> EngineConfig:
    """Load and validate engine configuration.

    Args:
        path: Path to engine config file. Defaults are used when None
              or when the file does not exist.

    Returns:
        Validated EngineConfig instance

    Raises:
        ValidationError: If config is invalid
        ValueError: If the file cannot be parsed
    """
    if path is None or not Path(path).exists():
        if path is not None:
            logger.warning(f"Engine config {path} not found, using defaults")
        return EngineConfig()

    raw = load_config(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Engine config must be a mapping, got {type(raw).__name__}")

    config = EngineConfig.model_validate(raw)

    # Relative template paths are resolved against the config file location
    if config.templates_path is not None and not config.templates_path.is_absolute():
        config = config.model_copy(
            update={"templates_path": Path(path).parent / config.templates_path}
        )
    return config
