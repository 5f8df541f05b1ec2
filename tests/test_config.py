import logging

import pytest

from pico.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_ERROR,
    DEFAULT_SYMBOL_TABLE_SCALE,
    DEFAULT_SYMBOL_TABLE_SIZE,
    Settings,
    int_from_env,
)

ENV_VARS = (
    "PICO_SYMBOL_TABLE_SIZE",
    "PICO_SYMBOL_TABLE_SCALE",
    "PICO_MAX_ERROR",
    "PICO_MAX_DEPTH",
    "PICO_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.symbol_table_size == DEFAULT_SYMBOL_TABLE_SIZE
    assert settings.symbol_table_scale == DEFAULT_SYMBOL_TABLE_SCALE
    assert settings.max_error == DEFAULT_MAX_ERROR
    assert settings.max_depth == DEFAULT_MAX_DEPTH
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PICO_SYMBOL_TABLE_SIZE", "16")
    monkeypatch.setenv("PICO_SYMBOL_TABLE_SCALE", "4")
    monkeypatch.setenv("PICO_MAX_ERROR", " 64 ")
    monkeypatch.setenv("PICO_MAX_DEPTH", "50")
    monkeypatch.setenv("PICO_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings == Settings(16, 4, 64, 50, "DEBUG")


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5"])
def test_invalid_values_fall_back(monkeypatch, caplog, raw):
    monkeypatch.setenv("PICO_MAX_DEPTH", raw)
    with caplog.at_level(logging.WARNING, logger="pico.config"):
        assert Settings.from_env().max_depth == DEFAULT_MAX_DEPTH
    assert "PICO_MAX_DEPTH" in caplog.text


def test_scale_factor_must_grow(monkeypatch):
    monkeypatch.setenv("PICO_SYMBOL_TABLE_SCALE", "1")
    assert Settings.from_env().symbol_table_scale == DEFAULT_SYMBOL_TABLE_SCALE


def test_int_from_env_unset_or_empty(monkeypatch):
    assert int_from_env("PICO_TEST_UNSET", 7) == 7
    monkeypatch.setenv("PICO_TEST_EMPTY", "")
    assert int_from_env("PICO_TEST_EMPTY", 9) == 9
