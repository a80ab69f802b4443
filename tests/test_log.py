"""Logging setup tests."""

import json
import logging

import pytest

from academy.log import get_logger, setup_logging
from academy.settings import Settings


@pytest.fixture
def json_logging():
    setup_logging(Settings(env="prod", log_level="INFO"))


def _events(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records if r.name.startswith("academy")]


def test_events_reach_stdlib_logging_with_logger_name(json_logging, caplog):
    with caplog.at_level(logging.INFO, logger="academy"):
        get_logger("academy.content.registry").info("content_registry_built", records=3)

    [event] = _events(caplog)
    assert event["event"] == "content_registry_built"
    assert event["logger"] == "academy.content.registry"
    assert event["level"] == "info"
    assert event["records"] == 3


def test_level_below_threshold_is_dropped(json_logging, caplog):
    with caplog.at_level(logging.INFO, logger="academy"):
        get_logger("academy.loaders").debug("noise")

    assert _events(caplog) == []


def test_exception_carries_traceback(json_logging, caplog):
    with caplog.at_level(logging.INFO, logger="academy"):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger("academy.loaders").exception("content_resolution_failed", name="x")

    [event] = _events(caplog)
    assert "RuntimeError: boom" in event["exception"]


def test_dev_console_logging(caplog):
    setup_logging(Settings(env="dev"))
    with caplog.at_level(logging.INFO, logger="academy"):
        get_logger("academy.main").info("academy_started")

    assert any("academy_started" in r.getMessage() for r in caplog.records)
