"""Exceptions raised outside the (never-failing) descriptor core."""

from __future__ import annotations


class ChStatementError(Exception):
    """Base class for chstatement errors."""


class ConfigError(ChStatementError):
    """Raised when ~/.chstatement/config.toml cannot be read or has bad values."""
