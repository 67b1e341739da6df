"""Tests for the clock source, formatter and logging helpers."""

import logging

import pytest

from linechange.utils import (
    Clock, SystemClock, configure_logging, fmt_duration, get_logger, minutes_to_ms, now_ms
)
from linechange.utils.logger import ROOT_LOGGER_NAME


@pytest.mark.parametrize(
    "milliseconds, expected",
    [
        (None, "00:00"),
        (-500, "00:00"),
        (999, "00:00"),
        (90_500, "01:30"),
        (3_599_999, "59:59"),
        (3_600_000, "01:00:00"),
        (3_661_000, "01:01:01"),
    ],
)
def test_fmt_duration(milliseconds, expected):
    assert fmt_duration(milliseconds) == expected


def test_fmt_duration_clamps_at_display_ceiling():
    assert fmt_duration(10_000, ceiling_ms=5_000) == "00:05"
    assert fmt_duration(4_000, ceiling_ms=5_000) == "00:04"


def test_system_clock_is_monotonic():
    clock = SystemClock()
    assert isinstance(clock, Clock)
    readings = [clock.now() for _ in range(100)]
    assert readings == sorted(readings)
    assert now_ms() >= readings[-1]


def test_minutes_to_ms():
    assert minutes_to_ms(1) == 60_000
    assert minutes_to_ms(0.5) == 30_000


def test_get_logger_namespaces():
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger("linechange.services.timer_service").name == "linechange.services.timer_service"
    assert get_logger("web").name == "linechange.web"


def test_configure_logging_is_idempotent(tmp_path):
    logger = configure_logging("DEBUG", log_dir=tmp_path)
    count = len(logger.handlers)
    configure_logging("DEBUG", log_dir=tmp_path)
    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG

    get_logger("test").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "linechange.log").read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
