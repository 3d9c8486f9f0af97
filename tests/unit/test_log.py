"""Tests for debate-sentiment logging setup."""

from __future__ import annotations

import logging
import re

import pytest

from debate_sentiment.log import get_logger, setup_logging


class TestSetupLogging:
    """Tests for :func:`setup_logging`."""

    def test_sets_level(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_is_info(self) -> None:
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_level_name_case_insensitive(self) -> None:
        setup_logging("warning")

        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging("LOUD")

    def test_idempotent(self) -> None:
        setup_logging()
        count = len(logging.getLogger().handlers)

        setup_logging("DEBUG")

        assert len(logging.getLogger().handlers) == count

    def test_second_call_updates_handler_level(self) -> None:
        setup_logging("INFO")
        setup_logging("ERROR")

        ours = [h for h in logging.getLogger().handlers if getattr(h, "_debate_sentiment_log_handler", False)]
        assert [h.level for h in ours] == [logging.ERROR]

    def test_foreign_handler_left_alone(self) -> None:
        foreign = logging.NullHandler()
        foreign.setLevel(logging.CRITICAL)
        logging.getLogger().addHandler(foreign)

        setup_logging("DEBUG")
        setup_logging("INFO")

        assert foreign in logging.getLogger().handlers
        assert foreign.level == logging.CRITICAL

    def test_noisy_libraries_capped(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger("urllib3").level == logging.WARNING
        assert logging.getLogger("matplotlib").level == logging.WARNING

    def test_noisy_libraries_untouched_when_disabled(self) -> None:
        logging.getLogger("PIL").setLevel(logging.NOTSET)

        setup_logging("DEBUG", quiet_libraries=False)

        assert logging.getLogger("PIL").level == logging.NOTSET


class TestLogOutput:
    """Tests for the emitted log format."""

    def test_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO")
        get_logger("debate_sentiment.test").info("hello world")

        err = capsys.readouterr().err
        assert re.search(
            r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2} \| INFO +\| debate_sentiment\.test \| hello world",
            err,
        )

    def test_debug_filtered_at_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO")
        get_logger("debate_sentiment.test").debug("should not appear")

        assert "should not appear" not in capsys.readouterr().err

    def test_get_logger_name(self) -> None:
        assert get_logger("debate_sentiment.x").name == "debate_sentiment.x"
