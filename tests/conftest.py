"""Pytest configuration and shared fixtures."""

import logging
import os

import pytest

from ipv4calc.config import reset_config


@pytest.fixture(autouse=True)
def reset_environment():
    """Isolate each test from IPV4CALC_* variables and cached config."""
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("IPV4CALC_"):
            del os.environ[key]
    reset_config()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_config()

    # CLI runs attach handlers bound to CliRunner streams
    logger = logging.getLogger("ipv4calc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
