"""Test the package logging helpers."""

import logging

import pytest

from src.utils.logger import LOG_FORMAT, ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    saved = (list(logger.handlers), logger.level)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


class TestGetLogger:
    """Logger naming."""

    def test_module_names_are_kept(self):
        assert get_logger("src.engine.automaton").name == "src.engine.automaton"

    def test_foreign_names_are_nested(self):
        assert get_logger("replay").name == f"{ROOT_LOGGER}.replay"

    def test_default_is_package_logger(self):
        assert get_logger() is logging.getLogger(ROOT_LOGGER)


class TestConfigureLogging:
    """Handler and level setup."""

    def test_sets_level_from_name(self, package_logger):
        configure_logging("DEBUG")
        assert package_logger.level == logging.DEBUG
        assert get_logger("src.engine.board").isEnabledFor(logging.DEBUG)

    def test_repeated_calls_keep_one_handler(self, package_logger):
        configure_logging("INFO")
        configure_logging("ERROR")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.ERROR
        assert package_logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_root_logger_untouched(self, package_logger):
        root = logging.getLogger()
        before = list(root.handlers)
        configure_logging("WARNING")
        assert root.handlers == before
