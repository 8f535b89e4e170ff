"""Tests for the structlog configuration."""

import json

import structlog

from storefront.infrastructure.logging import configure_logging


def test_json_format_emits_one_object_per_line(capsys):
    configure_logging(level="INFO", fmt="json")
    structlog.get_logger("test").info("Order created", order_id=3)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Order created"
    assert event["order_id"] == 3
    assert event["level"] == "info"


def test_level_filters_lower_events(capsys):
    configure_logging(level="WARNING", fmt="json")
    structlog.get_logger("test").info("quiet")
    assert capsys.readouterr().err == ""
    configure_logging(level="INFO", fmt="console")


def test_unknown_level_falls_back_to_info(capsys):
    configure_logging(level="LOUD", fmt="json")
    structlog.get_logger("test").info("heard")
    assert "heard" in capsys.readouterr().err
    configure_logging(level="INFO", fmt="console")
