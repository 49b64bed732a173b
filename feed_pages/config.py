"""Configuration for feed_pages.

Settings come from three layers, later ones winning:
built-in defaults, an optional YAML file, and FEED_PAGES_* environment variables.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from feed_pages.errors import ConfigError
from feed_pages.models.schemas import FailurePolicy


ENV_PREFIX = "FEED_PAGES_"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AggregatorConfig:
    """Runtime settings for a pipeline run."""

    name: str = "feed_pages"
    log_level: str = "INFO"
    output_dir: Path = Path(".")
    failure_policy: FailurePolicy = FailurePolicy.ABORT
    workers: int = 1
    timeout: float = 30.0
    user_agent: str = "FeedPages/0.1 (RSS Aggregator)"
    strict_status: bool = False
    escape_html: bool = True


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw YAML/env value to the type of the named field."""
    try:
        if name == "output_dir":
            return Path(value)
        if name == "failure_policy":
            return FailurePolicy(str(value).lower())
        if name == "workers":
            return int(value)
        if name == "timeout":
            return float(value)
        if name in ("strict_status", "escape_html"):
            return _to_bool(value)
        if name == "log_level":
            return str(value).upper()
        return str(value)
    except ValueError as e:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from e


def _validate(config: AggregatorConfig) -> AggregatorConfig:
    if config.log_level not in VALID_LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {config.log_level}")
    if config.workers < 1:
        raise ConfigError(f"workers must be at least 1, got {config.workers}")
    if config.timeout <= 0:
        raise ConfigError(f"timeout must be positive, got {config.timeout}")
    return config


def apply_overrides(config: AggregatorConfig, overrides: Dict[str, Any]) -> AggregatorConfig:
    """Return a copy of ``config`` with the given fields replaced.

    Keys whose value is None are ignored so CLI options that were not given
    leave the configured value alone.

    Raises:
        ConfigError: On unknown keys or values that cannot be converted
    """
    known = {f.name for f in fields(AggregatorConfig)}
    changes = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key not in known:
            raise ConfigError(f"Unknown configuration key: {key}")
        changes[key] = _coerce(key, value)
    return _validate(replace(config, **changes))


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _read_env() -> Dict[str, Any]:
    values = {}
    for f in fields(AggregatorConfig):
        raw = os.environ.get(ENV_PREFIX + f.name.upper())
        if raw is not None:
            values[f.name] = raw
    return values


def load_config(path: Optional[Union[str, Path]] = None) -> AggregatorConfig:
    """Load configuration from defaults, an optional YAML file and the environment.

    Args:
        path: Optional YAML file; FEED_PAGES_CONFIG is used when not given

    Returns:
        Validated configuration
    """
    config = AggregatorConfig()

    path = path or os.environ.get(ENV_PREFIX + "CONFIG")
    if path:
        config = apply_overrides(config, _read_yaml(Path(path)))

    return apply_overrides(config, _read_env())


_config: Optional[AggregatorConfig] = None


def get_config() -> AggregatorConfig:
    """Get or create the process-wide configuration."""
    global _config

    if _config is None:
        _config = load_config()
    return _config
