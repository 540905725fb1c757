from __future__ import annotations

import logging

import pytest

from mathmaster.core.app_config import AppConfig
from mathmaster.core.theory_provider import DEFAULT_THEORY_MODEL

_SETTING_VARIABLES = (
    "GEMINI_API_KEY",
    "API_KEY",
    "MATHMASTER_GEMINI_MODEL",
    "MATHMASTER_REQUEST_TIMEOUT",
    "MATHMASTER_LOG_LEVEL",
    "MATHMASTER_SENSITIVITY",
    "MATHMASTER_FEEDBACK_WINDOW_MS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in _SETTING_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def env_file(tmp_path):
    return tmp_path / ".env"


def test_defaults_without_environment(env_file):
    config = AppConfig(_env_file=env_file)

    assert config.gemini_api_key == ""
    assert not config.has_gemini
    assert config.gemini_model == DEFAULT_THEORY_MODEL
    assert config.request_timeout_seconds == 20.0
    assert config.log_level == "INFO"
    assert config.default_sensitivity == 65
    assert config.feedback_window_ms == 2000


def test_gemini_key_preferred_over_legacy_name(monkeypatch, env_file):
    monkeypatch.setenv("GEMINI_API_KEY", "new")
    monkeypatch.setenv("API_KEY", "old")

    config = AppConfig(_env_file=env_file)

    assert config.gemini_api_key == "new"
    assert config.has_gemini


def test_legacy_api_key_is_accepted(monkeypatch, env_file):
    monkeypatch.setenv("API_KEY", "old")

    assert AppConfig(_env_file=env_file).gemini_api_key == "old"


def test_empty_variable_counts_as_unset(monkeypatch, env_file):
    monkeypatch.setenv("MATHMASTER_GEMINI_MODEL", "")

    assert AppConfig(_env_file=env_file).gemini_model == DEFAULT_THEORY_MODEL


def test_env_file_supplies_missing_values(monkeypatch, env_file):
    env_file.write_text(
        "# local settings\n"
        'GEMINI_API_KEY="from-file"\n'
        "MATHMASTER_GEMINI_MODEL=gemini-2.0-flash\n"
        "UNRELATED_SETTING=1\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("MATHMASTER_LOG_LEVEL", "debug")

    config = AppConfig(_env_file=env_file)

    assert config.gemini_api_key == "from-file"
    assert config.gemini_model == "gemini-2.0-flash"
    assert config.log_level == "DEBUG"


def test_environment_overrides_env_file(monkeypatch, env_file):
    env_file.write_text("GEMINI_API_KEY=file\n", encoding="utf-8")
    monkeypatch.setenv("GEMINI_API_KEY", "env")

    assert AppConfig(_env_file=env_file).gemini_api_key == "env"


def test_invalid_values_keep_defaults(monkeypatch, env_file, caplog):
    monkeypatch.setenv("MATHMASTER_REQUEST_TIMEOUT", "soon")
    monkeypatch.setenv("MATHMASTER_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("MATHMASTER_FEEDBACK_WINDOW_MS", "-5")

    with caplog.at_level(logging.WARNING):
        config = AppConfig(_env_file=env_file)

    assert config.request_timeout_seconds == 20.0
    assert config.log_level == "INFO"
    assert config.feedback_window_ms == 2000
    assert "request_timeout_seconds" in caplog.text
    assert "log_level" in caplog.text


def test_negative_timeout_is_rejected(monkeypatch, env_file):
    monkeypatch.setenv("MATHMASTER_REQUEST_TIMEOUT", "-1")

    assert AppConfig(_env_file=env_file).request_timeout_seconds == 20.0


def test_numeric_settings_are_parsed(monkeypatch, env_file):
    monkeypatch.setenv("MATHMASTER_REQUEST_TIMEOUT", "7.5")
    monkeypatch.setenv("MATHMASTER_FEEDBACK_WINDOW_MS", "1500")

    config = AppConfig(_env_file=env_file)

    assert config.request_timeout_seconds == 7.5
    assert config.feedback_window_ms == 1500


@pytest.mark.parametrize(("raw", "expected"), [("80", 80), ("0", 1), ("300", 95), ("loud", 65)])
def test_sensitivity_is_clamped(monkeypatch, env_file, raw, expected):
    monkeypatch.setenv("MATHMASTER_SENSITIVITY", raw)

    assert AppConfig(_env_file=env_file).default_sensitivity == expected
