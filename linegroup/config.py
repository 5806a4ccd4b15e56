from __future__ import annotations
import codecs
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
import yaml

from .errors import ConfigError
from .logging_config import LEVELS

EMPTY_QUOTES = '""'
EMPTY_FLAG_ON = "1"
FROM_CONFIG = "-"


@dataclass(frozen=True, slots=True)
class EmptinessPolicy:
    """Which field value, if any, counts as absent and never links lines."""
    empty_value: Optional[str] = None

    @classmethod
    def from_flag(cls, flag: str) -> EmptinessPolicy:
        if str(flag).strip() == EMPTY_FLAG_ON:
            return cls(EMPTY_QUOTES)
        return cls(None)

    def is_empty(self, value: str) -> bool:
        return self.empty_value is not None and value == self.empty_value


@dataclass(frozen=True, slots=True)
class RunConfig:
    empty_flag: str = "0"
    log_level: str = "WARNING"
    encoding: str = "utf-8"

    @property
    def policy(self) -> EmptinessPolicy:
        return EmptinessPolicy.from_flag(self.empty_flag)


def load_config(path: str | Path) -> RunConfig:
    """Read a YAML run configuration.

    Args:
        path: YAML file with any of the keys empty_flag, log_level, encoding.

    Returns:
        RunConfig: Defaults overridden by the file's values.

    Raises:
        ConfigError: If the file cannot be read, is not a mapping or holds
            unknown keys.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config: {e}", path=str(path))

    if raw is None:
        return RunConfig()
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping", path=str(path))

    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", path=str(path))
    config = RunConfig(**{k: str(v) for k, v in raw.items()})
    if config.log_level.upper() not in LEVELS:
        raise ConfigError(f"Unknown log level: {config.log_level}", path=str(path))
    try:
        codecs.lookup(config.encoding)
    except LookupError:
        raise ConfigError(f"Unknown encoding: {config.encoding}", path=str(path))
    return config
