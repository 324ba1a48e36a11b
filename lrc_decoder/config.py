"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass, field

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_TIMEOUT = 20
OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ParserConfig:
    # max unanchored lines tolerated before giving up on the stream
    first_line_search_timeout: int = DEFAULT_SEARCH_TIMEOUT


@dataclass(frozen=True)
class Config:
    parser: ParserConfig = field(default_factory=ParserConfig)
    encoding: str = "utf-8-sig"
    output_format: str = "text"
    input_dir: str = "./lyrics"
    output_dir: str = "./decoded"
    log_level: str = "WARNING"


class ConfigError(ValueError):
    """Raised when a setting cannot be turned into a usable value."""


def load_yaml_config(path: str | None) -> dict:
    """Read decoder settings from *path*; no path means no overrides.

    A path that does not exist is tolerated with a warning. A file that is
    not valid YAML, or whose top level is not a mapping, is a ConfigError.
    """
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("No settings file at %s, decoding with defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Settings file {path} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must hold a mapping of keys")
    logger.info("Settings read from %s", path)
    return data


def _pick(cli_value, env_name: str, yaml_data: dict, yaml_key: str, default):
    """CLI flag wins over env var, env var over YAML, YAML over default."""
    if cli_value is not None:
        return cli_value
    if env_name in os.environ:
        return os.environ[env_name]
    return yaml_data.get(yaml_key, default)


def _as_timeout(value) -> int:
    # bool is an int subclass; `true` in YAML is not a line count
    if isinstance(value, bool):
        raise ConfigError(f"first_line_search_timeout must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(
            f"first_line_search_timeout must be an integer, got {value!r}"
        ) from None


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from CLI args, env vars, and parsed YAML data.

    Raises ConfigError for a non-integer search timeout or an unknown
    output format.
    """
    timeout = _pick(
        getattr(cli_args, "search_timeout", None),
        "LRC_SEARCH_TIMEOUT", yaml_data, "first_line_search_timeout",
        DEFAULT_SEARCH_TIMEOUT,
    )
    output_format = str(_pick(getattr(cli_args, "output", None),
                              "LRC_OUTPUT_FORMAT", yaml_data, "output_format", "text"))
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )
    default_level = "INFO" if getattr(cli_args, "watch", False) else "WARNING"

    return Config(
        parser=ParserConfig(first_line_search_timeout=_as_timeout(timeout)),
        encoding=_pick(getattr(cli_args, "encoding", None),
                       "LRC_ENCODING", yaml_data, "encoding", "utf-8-sig"),
        output_format=output_format,
        input_dir=_pick(getattr(cli_args, "input_dir", None),
                        "LRC_INPUT_DIR", yaml_data, "input_dir", "./lyrics"),
        output_dir=_pick(getattr(cli_args, "output_dir", None),
                         "LRC_OUTPUT_DIR", yaml_data, "output_dir", "./decoded"),
        log_level=str(_pick(getattr(cli_args, "log_level", None),
                            "LRC_LOG_LEVEL", yaml_data, "log_level", default_level)).upper(),
    )
