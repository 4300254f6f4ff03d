"""Configuration layer tests: env parsing, config file, merge precedence."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from async_tracker import create
from async_tracker.base.dto import TrackerSettings
from async_tracker.base.state import Idle, Pending
from async_tracker.config import DEFAULTS, get_tracker_config, load_settings, reset_config_cache
from async_tracker.config.env import ENV_MAP, env_overrides, parse_bool


def test_env_map_contains_expected_keys():
    for field in ["lazy", "log_rejections", "cancel_on_teardown", "json_logs"]:
        assert field in ENV_MAP
        assert ENV_MAP[field].startswith("ASYNC_TRACKER_")


def test_parse_bool_spellings():
    assert parse_bool("1") is True
    assert parse_bool(" Yes ") is True
    assert parse_bool("on") is True
    assert parse_bool("false") is False
    assert parse_bool("OFF") is False
    assert parse_bool("maybe") is None
    assert parse_bool("") is None
    assert parse_bool(None) is None


def test_defaults_without_env_or_file():
    assert get_tracker_config() == DEFAULTS
    settings = load_settings()
    assert settings == TrackerSettings()


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("ASYNC_TRACKER_LAZY", "true")
    monkeypatch.setenv("ASYNC_TRACKER_LOG_REJECTIONS", "nonsense")
    assert env_overrides() == {"lazy": True}
    cfg = get_tracker_config()
    assert cfg["lazy"] is True
    assert cfg["log_rejections"] is DEFAULTS["log_rejections"]


def test_json_config_file_section_is_merged(monkeypatch, tmp_path):
    path = tmp_path / "tracker.json"
    path.write_text(json.dumps({"tracker": {"cancel_on_teardown": True}, "other": {"x": 1}}), encoding="utf-8")
    monkeypatch.setenv("ASYNC_TRACKER_CONFIG_FILE", str(path))
    reset_config_cache()

    assert get_tracker_config()["cancel_on_teardown"] is True


def test_yaml_config_file_and_precedence(monkeypatch, tmp_path):
    path = tmp_path / "tracker.yaml"
    path.write_text("tracker:\n  lazy: true\n  log_rejections: false\n", encoding="utf-8")
    monkeypatch.setenv("ASYNC_TRACKER_CONFIG_FILE", str(path))
    monkeypatch.setenv("ASYNC_TRACKER_LOG_REJECTIONS", "1")
    reset_config_cache()

    cfg = get_tracker_config({"lazy": False, "name": None})
    assert cfg["lazy"] is False  # explicit override wins over file
    assert cfg["log_rejections"] is True  # env wins over file
    assert "name" not in cfg  # None overrides are ignored


def test_missing_or_invalid_config_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("ASYNC_TRACKER_CONFIG_FILE", str(tmp_path / "absent.json"))
    reset_config_cache()
    assert get_tracker_config() == DEFAULTS

    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("ASYNC_TRACKER_CONFIG_FILE", str(bad))
    assert get_tracker_config() == DEFAULTS


def test_settings_validation_rejects_bad_types():
    with pytest.raises(ValidationError):
        TrackerSettings(lazy="sometimes")


def test_create_honours_env_lazy_and_explicit_argument(monkeypatch):
    monkeypatch.setenv("ASYNC_TRACKER_LAZY", "1")
    assert create(lambda is_rerun: None).state == Idle()
    assert create(lambda is_rerun: None, lazy=False).state == Pending()


def test_create_applies_arguments_on_top_of_given_settings():
    base = TrackerSettings(cancel_on_teardown=True)
    ctrl = create(lambda is_rerun: None, lazy=True, name="named", settings=base)
    assert ctrl.lazy is True and ctrl.name == "named"
    assert base.lazy is False  # settings are immutable; a copy was made


def test_log_level_defaults_and_file_override(monkeypatch, tmp_path):
    assert load_settings().log_level == "INFO"

    path = tmp_path / "tracker.yaml"
    path.write_text("tracker:\n  log_level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("ASYNC_TRACKER_CONFIG_FILE", str(path))
    reset_config_cache()
    assert load_settings().log_level == "DEBUG"
