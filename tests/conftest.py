"""Shared fixtures for the medianamer test suite."""
import pytest

from medianamer.utils import LogLevel, logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Keep log level and log file changes from leaking between tests."""
    previous = logger.get_log_level()
    yield
    logger.set_log_level(previous)
    logger.set_log_file(None)
