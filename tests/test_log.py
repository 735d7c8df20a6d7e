import logging

import pytest

from astrofriends import log
from astrofriends.log import _coerce_level, configure_logging


@pytest.fixture
def restore_level():
    logger = logging.getLogger("astrofriends")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_repeated_calls_attach_one_handler(restore_level):
    configure_logging("debug")
    configure_logging("warning")
    attached = [h for h in restore_level.handlers if h is log._handler]
    assert len(attached) == 1
    assert restore_level.level == logging.WARNING


def test_env_level(monkeypatch, restore_level):
    monkeypatch.setenv("ASTRO_LOG_LEVEL", "ERROR")
    assert configure_logging() == logging.ERROR


@pytest.mark.parametrize(
    "value,expected",
    [(None, logging.INFO), ("", logging.INFO), ("10", 10), ("bogus", logging.INFO), (logging.DEBUG, logging.DEBUG)],
)
def test_coerce_level(value, expected):
    assert _coerce_level(value) == expected
