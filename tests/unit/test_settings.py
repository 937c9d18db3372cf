"""Tests for config.settings and p2p_common.logging_setup."""

import logging
from collections.abc import Iterator

import pytest

from config.settings import Settings
from src.p2p_common.logging_setup import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.LOG_LEVEL == "INFO"
        assert s.DEBUG is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_logger(self) -> Iterator[None]:
        logger = logging.getLogger("src")
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_sets_level_and_single_handler(self) -> None:
        logger = configure_logging("debug")
        configure_logging("warning")
        assert logger.name == "src"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert configure_logging("chatty").level == logging.INFO
