"""Tests for the panel configuration."""

import os

import pytest

from todopanel.config import ENV_PREFIX, PanelConfig, load_config
from todopanel.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


def test_defaults():
    config = PanelConfig()

    assert ".rs" in config.include_extensions
    assert "node_modules" in config.exclude_dirs
    assert config.scan_workers == 4
    assert config.log_level == "INFO"
    assert config.dock_area == "right"


def test_from_env(monkeypatch):
    monkeypatch.setenv("TODOPANEL_SCAN_WORKERS", "2")
    monkeypatch.setenv("TODOPANEL_EXTENSIONS", "rs, .TS,")
    monkeypatch.setenv("TODOPANEL_EXCLUDE_DIRS", "vendor,out")
    monkeypatch.setenv("TODOPANEL_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODOPANEL_SKIP_UNREADABLE", "no")

    config = PanelConfig.from_env()

    assert config.scan_workers == 2
    assert config.include_extensions == frozenset({".rs", ".ts"})
    assert config.exclude_dirs == frozenset({"vendor", "out"})
    assert config.log_level == "DEBUG"
    assert config.skip_unreadable is False


def test_from_env_rejects_bad_integer(monkeypatch):
    monkeypatch.setenv("TODOPANEL_MAX_FILE_BYTES", "lots")

    with pytest.raises(ConfigError, match="TODOPANEL_MAX_FILE_BYTES"):
        PanelConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_file_bytes": 0},
        {"scan_workers": 0},
        {"log_level": "LOUD"},
        {"dock_area": "top"},
        {"include_extensions": []},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        PanelConfig(**kwargs)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        PanelConfig(scan_workers=-1)


def test_load_config_without_file():
    assert load_config() == PanelConfig()


def test_load_config_yaml_overrides_env(tmp_path, monkeypatch):
    monkeypatch.setenv("TODOPANEL_SCAN_WORKERS", "8")
    path = tmp_path / "todopanel.yaml"
    path.write_text(
        "include_extensions: [rs, go]\n"
        "dock_area: Bottom\n"
        "max_file_bytes: 2048\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.include_extensions == frozenset({".rs", ".go"})
    assert config.dock_area == "bottom"
    assert config.max_file_bytes == 2048
    assert config.scan_workers == 8


@pytest.mark.parametrize(
    "content, message",
    [
        ("colour: blue\n", "Unknown configuration keys"),
        ("- a\n- b\n", "mapping"),
        ("key: [unclosed\n", "Invalid YAML"),
        ('scan_workers: "4"\n', "scan_workers must be an integer"),
        ('include_extensions: ".py"\n', "include_extensions must be a list"),
        ("skip_unreadable: sometimes\n", "skip_unreadable must be true or false"),
        ("encoding: no-such-codec\n", "Unknown encoding"),
    ],
)
def test_load_config_rejects_bad_files(tmp_path, content, message):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_empty_yaml_file_keeps_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == PanelConfig()


def test_to_scan_config():
    config = PanelConfig(include_extensions=["py"], scan_workers=3, max_file_bytes=10)
    scan_config = config.to_scan_config()

    assert scan_config.include_extensions == frozenset({".py"})
    assert scan_config.max_workers == 3
    assert scan_config.max_file_bytes == 10
    assert scan_config.accepts_suffix(".PY")


def test_unknown_encoding_from_env(monkeypatch):
    monkeypatch.setenv("TODOPANEL_ENCODING", "no-such-codec")

    with pytest.raises(ConfigError, match="Unknown encoding"):
        PanelConfig.from_env()
