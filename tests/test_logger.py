"""
Tests du système de logging
"""

import logging
import logging.handlers

import pytest

from tempharvest.core.logger import LOGGER_NAME, HarvestLogger, get_logger


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved


def test_rotating_file_handler(config, tmp_path, clean_logger):
    log_file = tmp_path / 'logs' / 'tempharvest.log'
    config.set('logging', 'log_file', str(log_file))
    config.set('logging', 'log_level', 'DEBUG')

    harvest_logger = HarvestLogger(config)
    harvest_logger.info("relevé terminé")

    assert harvest_logger.get_logger() is clean_logger
    assert clean_logger.level == logging.DEBUG
    file_handlers = [h for h in clean_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 10485760
    assert file_handlers[0].backupCount == 5

    file_handlers[0].flush()
    assert "relevé terminé" in log_file.read_text(encoding='utf-8')


def test_handlers_are_not_duplicated(config, tmp_path, clean_logger):
    config.set('logging', 'log_file', str(tmp_path / 'tempharvest.log'))

    HarvestLogger(config)
    count = len(clean_logger.handlers)
    HarvestLogger(config)

    assert len(clean_logger.handlers) == count


def test_get_logger():
    assert get_logger() is logging.getLogger(LOGGER_NAME)
