"""User configuration — ~/.chstatement/config.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from chstatement.errors import ConfigError
from chstatement.parser import DEFAULT_DIALECT
from chstatement.statementlog import DEFAULT_RETENTION_DAYS

_CONFIG_FILE = Path.home() / ".chstatement" / "config.toml"


@dataclass(frozen=True)
class Config:
    dialect: str = DEFAULT_DIALECT
    default_database: str | None = None
    log_enabled: bool = False
    log_retention_days: int = DEFAULT_RETENTION_DAYS


def _load_file(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e


def _section(data: dict, name: str, path: Path) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [{name}] must be a table")
    return section


def _typed(section: dict, key: str, expected: type, default: object, path: Path) -> object:
    value = section.get(key, default)
    # bool is an int subclass; reject it where a number is expected.
    if value is not None and (
        not isinstance(value, expected) or (expected is int and isinstance(value, bool))
    ):
        raise ConfigError(f"{path}: '{key}' must be of type {expected.__name__}")
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration, falling back to defaults for anything not set.

    Raises ConfigError if the file is malformed or a value has the wrong type.
    """
    path = path or _CONFIG_FILE
    data = _load_file(path)
    parser = _section(data, "parser", path)
    log = _section(data, "log", path)

    retention = _typed(log, "retention_days", int, DEFAULT_RETENTION_DAYS, path)
    if retention < 1:
        raise ConfigError(f"{path}: 'retention_days' must be at least 1")

    return Config(
        dialect=_typed(parser, "dialect", str, DEFAULT_DIALECT, path),
        default_database=_typed(parser, "default_database", str, None, path),
        log_enabled=_typed(log, "enabled", bool, False, path),
        log_retention_days=retention,
    )
