import logging

import pytest

from extensible_choice.utils.logging import configure_logging, log_calls


def test_log_calls_traces_calls(caplog):
    @log_calls("tests.traced")
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="tests.traced"):
        assert add(1, 2) == 3

    assert "Calling add" in caplog.text
    assert "add returned 3" in caplog.text


def test_log_calls_logs_and_reraises(caplog):
    @log_calls("tests.traced")
    def fail():
        raise ValueError("bad input")

    with caplog.at_level(logging.DEBUG, logger="tests.traced"):
        with pytest.raises(ValueError):
            fail()

    assert "Error in fail: bad input" in caplog.text


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
