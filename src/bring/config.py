# Copyright 2026 Bring Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser options and the YAML configuration file used by the Bring CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".bring.yaml"

DEFAULT_MAX_DEPTH = 128

# Deepest nesting the recursive parser can handle within Python's default
# recursion limit.
MAX_DEPTH_LIMIT = 256

OUTPUT_FORMATS = ("json", "yaml")


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ParserOptions:
    """Tunables for a single parse.

    Attributes:
        max_depth: Maximum nesting of objects and arrays before parsing fails
            with MaxDepthExceededError. Must lie in 1..MAX_DEPTH_LIMIT.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}")


@dataclass
class BringConfig:
    """Settings read from a `.bring.yaml` file.

    Attributes:
        max_depth: Nesting limit handed to the parser.
        indent: Indentation width for JSON output.
        output_format: Default format of the `convert` command ("json" or "yaml").
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    indent: int = 2
    output_format: str = "json"

    def parser_options(self) -> ParserOptions:
        """Return the parser options described by this configuration."""
        return ParserOptions(max_depth=self.max_depth)


def load_config(path: Path) -> BringConfig:
    """Load and parse a Bring configuration file.

    Args:
        path: Path to the `.bring.yaml` file.

    Returns:
        A BringConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_config(text, source_label=str(path))


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"max-depth", "indent", "output-format"})


def _parse_config(text: str, source_label: str = "<string>") -> BringConfig:
    """Parse configuration YAML text into a BringConfig.

    An empty document yields the defaults.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return BringConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    config = BringConfig()
    if "max-depth" in data:
        max_depth = _require_positive_int(data, "max-depth", source_label)
        if max_depth > MAX_DEPTH_LIMIT:
            raise ConfigError(f"{source_label}: 'max-depth' must be at most {MAX_DEPTH_LIMIT}")
        config.max_depth = max_depth
    if "indent" in data:
        config.indent = _require_non_negative_int(data, "indent", source_label)
    if "output-format" in data:
        output_format = data["output-format"]
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"{source_label}: 'output-format' must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        config.output_format = output_format
    return config


def _require_int(mapping: dict[str, object], key: str, source_label: str) -> int:
    value = mapping[key]
    # bool is a subclass of int but `max-depth: yes` is not a number.
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{source_label}: '{key}' must be an integer")
    return value


def _require_positive_int(mapping: dict[str, object], key: str, source_label: str) -> int:
    value = _require_int(mapping, key, source_label)
    if value < 1:
        raise ConfigError(f"{source_label}: '{key}' must be at least 1")
    return value


def _require_non_negative_int(mapping: dict[str, object], key: str, source_label: str) -> int:
    value = _require_int(mapping, key, source_label)
    if value < 0:
        raise ConfigError(f"{source_label}: '{key}' must not be negative")
    return value
