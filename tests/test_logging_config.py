import logging

import pytest

from shapes2d.logging_config import PACKAGE_LOGGER_NAME, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_installs_console_handler(package_logger):
    logger = setup_logging(level=logging.DEBUG)
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_setup_logging_does_not_duplicate_handlers(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_setup_logging_writes_file(package_logger, tmp_path):
    log_file = tmp_path / "shapes2d.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    assert len(package_logger.handlers) == 2

    logging.getLogger("shapes2d.vector").debug("hello from the vector module")
    for handler in package_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "shapes2d.vector - DEBUG - hello from the vector module" in content
