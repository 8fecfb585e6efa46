import logging

from book_store_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


def test_setup_logging_configures_package_logger():
    logger = setup_logging("debug")
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert logger.handlers
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging("INFO")
    handlers = list(first.handlers)
    second = setup_logging("WARNING")
    assert second.handlers == handlers
    assert second.level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
