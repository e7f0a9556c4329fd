import logging

from winners.core.logger import setup_logging


def test_known_level():
    assert setup_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    logging.getLogger().handlers.clear()


def test_unknown_level_falls_back_to_warning():
    assert setup_logging("LOUD") == logging.WARNING
    assert setup_logging(None) == logging.WARNING
    logging.getLogger().handlers.clear()
