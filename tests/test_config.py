import json

import pytest

from hourly_weather import config
from hourly_weather.config import Settings, load_cfg, load_settings
from hourly_weather.errors import ConfigError


def test_defaults():
    assert load_settings(env={}, cfg={}) == Settings(hours=24, timeout=10.0, table=False, log_level="WARNING")


def test_missing_file_means_no_overrides():
    assert load_cfg() == {}


def test_file_then_env(tmp_path, monkeypatch):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"hours": 6, "table": True, "timeout": 3}))
    monkeypatch.setattr(config, "CFG_PATH", str(path))

    s = load_settings(env={"WEATHER_HOURS": "12", "WEATHER_LOG_LEVEL": "debug"})
    assert s.hours == 12
    assert s.table is True
    assert s.timeout == 3.0
    assert s.log_level == "DEBUG"


def test_blank_env_is_ignored():
    assert load_settings(env={"WEATHER_HOURS": "  "}, cfg={"hours": 6}).hours == 6


@pytest.mark.parametrize("env", [
    {"WEATHER_HOURS": "six"},
    {"WEATHER_HOURS": "6.9"},
    {"WEATHER_HOURS": "-1"},
    {"WEATHER_TIMEOUT": "0"},
    {"WEATHER_TABLE": "maybe"},
    {"WEATHER_LOG_LEVEL": "LOUD"},
])
def test_bad_values(env):
    with pytest.raises(ConfigError):
        load_settings(env=env, cfg={})


def test_broken_file(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{oops")
    with pytest.raises(ConfigError):
        load_cfg(str(path))
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_cfg(str(path))


@pytest.mark.parametrize("hours", [True, 6.9, "6.5"])
def test_hours_must_be_a_whole_number(hours):
    with pytest.raises(ConfigError, match="integer"):
        load_settings(env={}, cfg={"hours": hours})


def test_integral_float_hours_accepted():
    assert load_settings(env={}, cfg={"hours": 6.0}).hours == 6
