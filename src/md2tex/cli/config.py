#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2tex/cli/config.py
"""Configuration file discovery and loading for the md2tex CLI.

Configuration files hold one table per options class::

    [markdown]
    parse_math = false

    [latex]
    figure_placement = "htbp"

Keys are option field names. TOML, YAML and JSON files are supported, as is
a ``[tool.md2tex]`` section in ``pyproject.toml``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import MISSING, fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional, Type

import yaml

from md2tex.cli.builder import OPTIONS_CLASSES
from md2tex.constants import CONFIG_FILENAMES
from md2tex.exceptions import ConfigError
from md2tex.options.latex import LatexRendererOptions
from md2tex.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)


def _load_pyproject_md2tex_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.md2tex] section from pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.md2tex] section, or empty dict if not found

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get("md2tex", {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.md2tex] section in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for configuration files in priority order:
    1. .md2tex.toml
    2. .md2tex.yaml / .md2tex.yml
    3. .md2tex.json
    4. pyproject.toml (with [tool.md2tex] section)

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_md2tex_section(pyproject_path):
                    return pyproject_path
            except ConfigError:
                # Invalid pyproject.toml, skip it and continue searching
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover configuration file in standard locations.

    Searches the current directory and its parents first, then the user's
    home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

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
    ConfigError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        config = _load_pyproject_md2tex_section(config_path)
    elif ext == ".toml":
        config = _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        config = _load_yaml_config(config_path)
    elif ext == ".json":
        config = _load_json_config(config_path)
    else:
        raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path))

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading TOML config {config_path}: {e}", str(config_path), e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading JSON config {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(f"JSON config file must contain an object, got {type(config).__name__}", str(config_path))
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading YAML config {config_path}: {e}", str(config_path), e) from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"YAML config file must contain a mapping, got {type(config).__name__}", str(config_path))
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2TEX_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def _section_values(config: Dict[str, Any], section: str, options_class: Type[Any]) -> Dict[str, Any]:
    """Validate one config table against the fields of its options class."""
    values = config.get(section, {})
    if not isinstance(values, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(values).__name__}")

    known = {f.name: f for f in fields(options_class)}
    unknown = sorted(set(values) - set(known))
    if unknown:
        raise ConfigError(f"Unknown [{section}] option(s): {', '.join(unknown)}")

    for name, value in values.items():
        default = known[name].default
        if default is not MISSING and type(value) is not type(default):
            raise ConfigError(
                f"[{section}] {name} must be {type(default).__name__}, got {type(value).__name__}"
            )
    return dict(values)


def build_options(
    parsed_args: argparse.Namespace, config: Optional[Dict[str, Any]] = None
) -> tuple[MarkdownParserOptions, LatexRendererOptions]:
    """Build parser and renderer options from a config dict and parsed flags.

    Flags that were given (or set through environment variables) override
    configuration file values, which override the dataclass defaults.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command line arguments
    config : dict, optional
        Configuration file contents

    Returns
    -------
    tuple of (MarkdownParserOptions, LatexRendererOptions)
        Options for the parser and the renderer

    Raises
    ------
    ConfigError
        If the configuration has unknown sections, unknown keys or values of
        the wrong type, or if an option value fails validation

    """
    config = config or {}
    unknown_sections = sorted(set(config) - set(OPTIONS_CLASSES))
    if unknown_sections:
        raise ConfigError(f"Unknown configuration section(s): {', '.join(unknown_sections)}")

    built: dict[str, Any] = {}
    for section, options_class in OPTIONS_CLASSES.items():
        values = _section_values(config, section, options_class)
        for f in fields(options_class):
            flag_value = getattr(parsed_args, f.name, None)
            if flag_value is not None:
                values[f.name] = flag_value
        try:
            built[section] = options_class(**values)
        except ValueError as e:
            raise ConfigError(f"Invalid [{section}] options: {e}", original_error=e) from e

    return built["markdown"], built["latex"]


__all__ = [
    "build_options",
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
]
