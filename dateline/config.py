import logging
from pathlib import Path

import yaml  # pip install pyyaml

from .errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config() -> dict:
    return {
        "markdown_extensions": [],
        "log_level": "INFO",
    }


def load_config(config_path=None) -> dict:
    """
    Load the YAML build config and apply defaults.

      markdown_extensions: [tables, fenced_code]
      log_level: DEBUG

    With no path, every key takes its default.
    """
    cfg = default_config()
    if config_path is None:
        return cfg

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    # markdown_extensions can be a string or a list
    extensions = data.get("markdown_extensions", [])
    if isinstance(extensions, str):
        cfg["markdown_extensions"] = [extensions]
    elif isinstance(extensions, list):
        cfg["markdown_extensions"] = [str(x) for x in extensions]
    elif extensions is not None:
        raise ConfigError("markdown_extensions must be a string or a list")

    level = data.get("log_level")
    level = cfg["log_level"] if level is None else str(level).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log_level {level!r}")
    cfg["log_level"] = level

    return cfg


def log_level(cfg: dict) -> int:
    return getattr(logging, cfg["log_level"])
