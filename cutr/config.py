"""Configuration loading and request resolution for cutr.

Settings come from three layers, highest priority first: command line values,
an optional YAML config file, and built-in defaults.  The layers are combined
with a :class:`~collections.ChainMap` and resolved into one
:class:`ExtractionRequest`.
"""

import logging
import os
from collections import ChainMap
from pathlib import Path
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from cutr.exceptions import ConfigError, UsageError
from cutr.extract import DEFAULT_DELIMITER, Bytes, Chars, ExtractionMode, Fields

# Try to import yaml
try:
    from ruamel.yaml import YAML

    yaml = YAML(typ="base")
except ImportError as e:
    raise ImportError("ruamel.yaml not available. Install with: pip install ruamel.yaml") from e

CONFIG_ENV_VAR = "CUTR_CONFIG"

MODE_KEYS = ("fields", "bytes", "chars")
CONFIG_KEYS = {"delimiter", *MODE_KEYS}

DEFAULTS: Dict[str, Any] = {
    "delimiter": DEFAULT_DELIMITER,
    "files": ["-"],
}


class ExtractionRequest(NamedTuple):
    """Validated settings for one cutr invocation."""

    files: List[str]
    mode: ExtractionMode
    selection: str


class CutConfig:
    """Class to load and store cutr defaults from a YAML file"""

    def __init__(self):
        """Initialize an empty configuration"""
        self.data: Dict[str, Any] = {}

    def load(self, file: Path):
        """Load configuration from a YAML file"""

        if not file.is_file():
            raise ConfigError(f"Config file not found: {file}")
        try:
            with file.open() as f:
                data = yaml.load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load config file: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {file} must contain a mapping, not {type(data).__name__}")

        unknown = sorted(str(key) for key in data if key not in CONFIG_KEYS)
        if unknown:
            raise ConfigError(f"Unknown config key(s) in {file}: {', '.join(unknown)}")

        # The base loader keeps scalars as written ("+1" stays "+1"); only nested values are left to reject
        nested = sorted(str(key) for key, value in data.items() if not isinstance(value, str))
        if nested:
            raise ConfigError(f"Config key(s) in {file} must be plain strings: {', '.join(nested)}")

        self.data = dict(data)
        logging.debug(f"Loaded config from {file}: {self.data}")


def find_config_file(explicit: Optional[str] = None) -> Optional[Path]:
    """Return the config file to load, if any.

    An explicit ``--config`` path wins over the ``CUTR_CONFIG`` environment
    variable.
    """
    if explicit:
        return Path(explicit)
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return None


def _resolve_mode(cli_values: Mapping[str, Any], file_values: Mapping[str, Any]) -> tuple[str, str]:
    """Pick the single extraction mode and its selection string.

    Mode flags on the command line hide any mode set in the config file.
    """
    given = [key for key in MODE_KEYS if cli_values.get(key) is not None]
    if not given:
        given = [key for key in MODE_KEYS if file_values.get(key) is not None]
        source = file_values
    else:
        source = cli_values

    if not given:
        raise UsageError("Must have --fields, --bytes, or --chars")
    if len(given) > 1:
        raise UsageError("Only one of --fields, --bytes, or --chars may be given")

    key = given[0]
    return key, str(source[key])


def build_mode(kind: str, delimiter: str) -> ExtractionMode:
    """Build the extraction mode for *kind* (``fields``, ``bytes`` or ``chars``).

    Raises:
        UsageError: if *delimiter* is not exactly one byte in field mode
    """
    if kind == "fields":
        if len(delimiter.encode("utf-8")) != 1:
            raise UsageError(f'--delim "{delimiter}" must be a single byte')
        return Fields(delimiter)
    if kind == "bytes":
        return Bytes()
    if kind == "chars":
        return Chars()
    raise UsageError(f"Unknown extraction mode: {kind}")


def resolve_request(cli_values: Mapping[str, Any], config_file: Optional[Path] = None) -> ExtractionRequest:
    """Combine command line values, the config file and defaults into a request.

    Args:
        cli_values: Parsed command line options; ``None`` means "not given"
        config_file: Optional YAML file with default settings

    Returns:
        The validated extraction request

    Raises:
        ConfigError: if the config file cannot be loaded
        UsageError: if no mode or more than one mode is selected, or the
            delimiter is invalid
    """
    config = CutConfig()
    if config_file is not None:
        config.load(config_file)

    given = {key: value for key, value in cli_values.items() if value is not None}
    if not given.get("files"):
        given.pop("files", None)
    settings = ChainMap(given, config.data, DEFAULTS)

    kind, selection = _resolve_mode(given, config.data)
    mode = build_mode(kind, settings["delimiter"])

    return ExtractionRequest(files=list(settings["files"]), mode=mode, selection=selection)
