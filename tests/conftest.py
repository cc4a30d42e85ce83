"""Pytest configuration and fixtures."""

import logging

import pytest

from loadassert.config import AssertConfig, configure, reset_config
from loadassert.controller import IterationController, bound


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers added to loadassert loggers so tests don't leak output."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("loadassert"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def plain_config():
    """Run every test with uncolored messages and a clean config afterwards."""
    configure(AssertConfig(colors=False))
    yield
    reset_config()


@pytest.fixture(autouse=True)
def controller():
    """A fresh controller bound for the duration of each test."""
    controller = IterationController(name="test-iteration")
    with bound(controller):
        yield controller
