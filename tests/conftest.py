"""Pytest configuration for termlist tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _quiet_termlist_logging():
    """Drop handlers installed by setup_logging so tests never write log files."""
    yield
    logger = logging.getLogger("termlist")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))
