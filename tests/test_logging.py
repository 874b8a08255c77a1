"""
Testing log configuration: stderr output, levels, and separation from game output.
"""

import io
import logging
import sys

import pytest

from main import main
from ui.logger_config import HANDLER_NAME, setup_logger


@pytest.fixture
def named_logger():
    name = "ciphermind.test"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_handler_writes_to_stderr(named_logger):
    logger = setup_logger(named_logger, logging.DEBUG)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert handler.level == logging.DEBUG
    assert handler.get_name() == HANDLER_NAME


def test_second_call_updates_handler_level(named_logger):
    setup_logger(named_logger, logging.WARNING)
    logger = setup_logger(named_logger, logging.DEBUG)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_second_call_leaves_foreign_handlers_alone(named_logger):
    logger = logging.getLogger(named_logger)
    foreign = logging.NullHandler()
    foreign.setLevel(logging.ERROR)
    logger.addHandler(foreign)

    setup_logger(named_logger, logging.DEBUG)

    assert logger.handlers == [foreign]
    assert foreign.level == logging.ERROR


def test_debug_records_printed_to_stderr(named_logger, capsys):
    logger = setup_logger(named_logger, logging.DEBUG)

    logger.debug("secret ABCD")

    captured = capsys.readouterr()
    assert "[DEBUG] ciphermind.test: secret ABCD" in captured.err
    assert "secret ABCD" not in captured.out


def test_debug_level_logs_secret_outside_game_output(monkeypatch, capsys, caplog):
    caplog.set_level(logging.DEBUG)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))

    assert main(["--seed", "11", "--no-color", "--log-level", "DEBUG"]) == 0

    generated = [
        r for r in caplog.records if r.getMessage().startswith("Generated secret code")
    ]
    assert len(generated) == 1
    assert generated[0].levelno == logging.DEBUG
    assert "Generated secret code" not in capsys.readouterr().out


def test_default_level_hides_secret(monkeypatch, capsys, caplog):
    caplog.set_level(logging.WARNING)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))

    assert main(["--seed", "11", "--no-color"]) == 0

    assert not any(
        r.getMessage().startswith("Generated secret code") for r in caplog.records
    )
