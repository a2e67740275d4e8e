"""Root conftest — shared fixtures."""

from __future__ import annotations

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path):
    """Keep config and statement logs out of the real ~/.chstatement."""
    home = tmp_path / "home"
    with patch("chstatement.config._CONFIG_FILE", home / "config.toml"), patch(
        "chstatement.statementlog._LOG_ROOT", home / "logs"
    ):
        yield home
