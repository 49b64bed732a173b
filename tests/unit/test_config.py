"""Unit tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from feed_pages.config import AggregatorConfig, apply_overrides, load_config
from feed_pages.errors import ConfigError
from feed_pages.models.schemas import FailurePolicy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CONFIG", "LOG_LEVEL", "OUTPUT_DIR", "FAILURE_POLICY", "WORKERS",
                 "TIMEOUT", "STRICT_STATUS", "ESCAPE_HTML"):
        monkeypatch.delenv("FEED_PAGES_" + name, raising=False)


def test_defaults():
    config = load_config()

    assert config == AggregatorConfig()
    assert config.failure_policy is FailurePolicy.ABORT
    assert config.escape_html is True
    assert config.strict_status is False


def test_yaml_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.safe_dump({
        "output_dir": "site",
        "failure_policy": "skip",
        "workers": 4,
        "escape_html": False,
    }))

    config = load_config(path)

    assert config.output_dir == Path("site")
    assert config.failure_policy is FailurePolicy.SKIP
    assert config.workers == 4
    assert config.escape_html is False


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("workers: 4\n")
    monkeypatch.setenv("FEED_PAGES_WORKERS", "8")
    monkeypatch.setenv("FEED_PAGES_STRICT_STATUS", "yes")

    config = load_config(path)

    assert config.workers == 8
    assert config.strict_status is True


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("log_level: debug\n")
    monkeypatch.setenv("FEED_PAGES_CONFIG", str(path))

    assert load_config().log_level == "DEBUG"


def test_overrides_ignore_none():
    config = apply_overrides(AggregatorConfig(workers=3), {"workers": None, "timeout": 5})

    assert config.workers == 3
    assert config.timeout == 5.0


@pytest.mark.parametrize("overrides", [
    {"workers": 0},
    {"workers": "many"},
    {"timeout": -1},
    {"failure_policy": "retry"},
    {"log_level": "LOUD"},
    {"colour": "blue"},
])
def test_invalid_values(overrides):
    with pytest.raises(ConfigError):
        apply_overrides(AggregatorConfig(), overrides)


def test_yaml_must_be_mapping(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_missing_yaml_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "nope.yaml")
