"""Test loading ~/.chstatement/config.toml."""

import pytest

from chstatement.config import Config, load_config
from chstatement.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "absent.toml")
    assert config == Config()
    assert config.dialect == "clickhouse"
    assert config.default_database is None
    assert config.log_enabled is False
    assert config.log_retention_days == 30


def test_default_path_is_used(isolated_home):
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.toml").write_text('[parser]\ndialect = "postgres"\n')
    assert load_config().dialect == "postgres"


def test_full_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[parser]\n"
        'dialect = "clickhouse"\n'
        'default_database = "analytics"\n'
        "\n"
        "[log]\n"
        "enabled = true\n"
        "retention_days = 7\n"
    )
    assert load_config(path) == Config(
        dialect="clickhouse",
        default_database="analytics",
        log_enabled=True,
        log_retention_days=7,
    )


def test_malformed_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[parser\n")
    with pytest.raises(ConfigError, match="cannot read"):
        load_config(path)


@pytest.mark.parametrize(
    "body,key",
    [
        ("[parser]\ndialect = 1\n", "dialect"),
        ("[parser]\ndefault_database = true\n", "default_database"),
        ("[log]\nenabled = \"yes\"\n", "enabled"),
        ("[log]\nretention_days = \"30\"\n", "retention_days"),
        ("[log]\nretention_days = true\n", "retention_days"),
    ],
)
def test_wrong_types(tmp_path, body, key):
    path = tmp_path / "config.toml"
    path.write_text(body)
    with pytest.raises(ConfigError, match=key):
        load_config(path)


def test_section_must_be_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('parser = "clickhouse"\n')
    with pytest.raises(ConfigError, match=r"\[parser\]"):
        load_config(path)


def test_retention_must_be_positive(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[log]\nretention_days = 0\n")
    with pytest.raises(ConfigError, match="at least 1"):
        load_config(path)
