"""Tests for environment settings."""

import logging

from services.settings import Settings, setup_logging


def test_defaults() -> None:
    s = Settings.from_env({})
    assert s == Settings()
    assert (s.log_level, s.theme, s.view, s.port, s.minimal) == ("INFO", "dark", "app", 0, False)


def test_reads_environment() -> None:
    s = Settings.from_env({
        "FLI_LOG_LEVEL": "debug",
        "FLI_THEME": "LIGHT",
        "FLI_VIEW": "web",
        "PORT": "8550",
        "APP_MINIMAL": "1",
    })
    assert (s.log_level, s.theme, s.view, s.port, s.minimal) == ("DEBUG", "light", "web", 8550, True)


def test_invalid_values_fall_back() -> None:
    s = Settings.from_env({"FLI_LOG_LEVEL": "loud", "FLI_THEME": "blue", "FLI_VIEW": "tv", "PORT": "abc"})
    assert s == Settings()
    assert Settings.from_env({"PORT": "-5"}).port == 0


def test_setup_logging_sets_root_level() -> None:
    root = logging.getLogger()
    before = root.level
    try:
        setup_logging(Settings(log_level="DEBUG"))
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(before)
