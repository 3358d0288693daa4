"""
Tests for the console logging setup
"""

import json
import logging

import pytest

from agecalc.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_output(restore_root_logger, capsys):
    logger = setup_logging("INFO", use_json=True)
    logger.info("Computed age %s", "24 years, 0 months, 0 days")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["level"] == "INFO"
    assert record["logger"] == "agecalc"
    assert record["message"] == "Computed age 24 years, 0 months, 0 days"
    assert "timestamp" in record


def test_json_output_includes_exception(restore_root_logger, capsys):
    logger = setup_logging("ERROR", use_json=True)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("failed")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["level"] == "ERROR"
    assert "RuntimeError: boom" in record["exception"]


def test_human_readable_output(restore_root_logger, capsys):
    logger = setup_logging("DEBUG")
    logger.debug("Range check failed for day")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert line.startswith("DEBUG")
    assert "[agecalc] Range check failed for day" in line


def test_level_filters_messages(restore_root_logger, capsys):
    logger = setup_logging("WARNING")
    logger.info("hidden")
    assert "hidden" not in capsys.readouterr().out


def test_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO
